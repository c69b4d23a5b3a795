from __future__ import annotations

import argparse
import logging
from typing import Dict, List, Optional

import pygame

from square_game.app import CooldownManager, GameService, InputCommand, RankingService
from square_game.game import GameConfig, GameState

from .renderer import Renderer


logger = logging.getLogger(__name__)

KEY_TO_COMMAND: Dict[int, InputCommand] = {
    pygame.K_LEFT: InputCommand.MOVE_LEFT,
    pygame.K_RIGHT: InputCommand.MOVE_RIGHT,
    pygame.K_UP: InputCommand.ROTATE_CLOCKWISE,
    pygame.K_z: InputCommand.ROTATE_CLOCKWISE,
    pygame.K_x: InputCommand.ROTATE_COUNTER_CLOCKWISE,
    pygame.K_DOWN: InputCommand.MOVE_DOWN,
    pygame.K_SPACE: InputCommand.INSTANT_DROP,
    pygame.K_p: InputCommand.PAUSE,
    pygame.K_r: InputCommand.RESET,
}


def handle_command(service: GameService, game_id: str, command: InputCommand) -> None:
    if command is InputCommand.MOVE_LEFT:
        service.move_block_left(game_id)
    elif command is InputCommand.MOVE_RIGHT:
        service.move_block_right(game_id)
    elif command is InputCommand.ROTATE_CLOCKWISE:
        service.rotate_block_clockwise(game_id)
    elif command is InputCommand.ROTATE_COUNTER_CLOCKWISE:
        service.rotate_block_counterclockwise(game_id)
    elif command is InputCommand.MOVE_DOWN:
        service.accelerate_fall(game_id)
    elif command is InputCommand.INSTANT_DROP:
        service.drop_instantly(game_id)
    elif command is InputCommand.PAUSE:
        service.toggle_pause(game_id)
    elif command is InputCommand.RESET:
        service.restart_game(game_id)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Play the square-matching block puzzle")
    p.add_argument("--seed", type=int, default=None, help="Seed for the block pattern sequence")
    p.add_argument("--fps", type=int, default=30, help="Game ticks per second")
    p.add_argument("--cell-size", type=int, default=28)
    p.add_argument("--log-level", default="INFO")
    return p


def run(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(name)s %(levelname)s %(message)s")

    service = GameService(config=GameConfig(random_seed=args.seed))
    ranking = RankingService()
    cooldowns = CooldownManager()
    renderer = Renderer(cell_size=args.cell_size)

    pygame.init()
    try:
        clock = pygame.time.Clock()
        snapshot = service.start_new_game()
        game_id = snapshot.game_id
        screen = pygame.display.set_mode(renderer.window_size(snapshot.width, snapshot.height))
        pygame.display.set_caption("Square Game")
        # Held keys repeat; CooldownManager throttles the repeats per command
        pygame.key.set_repeat(50, 50)

        recorded = False
        running = True
        while running:
            now = pygame.time.get_ticks()
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                        continue
                    command = KEY_TO_COMMAND.get(event.key)
                    if command is not None and cooldowns.try_execute(command, now):
                        handle_command(service, game_id, command)
                        if command is InputCommand.RESET:
                            recorded = False
                elif event.type == pygame.KEYUP and event.key == pygame.K_DOWN:
                    service.disable_fast_fall(game_id)

            snapshot = service.update_frame(game_id)
            if snapshot.state is GameState.GAME_OVER and not recorded:
                if ranking.is_top_score(snapshot.score):
                    logger.info("new top score: %d", snapshot.score)
                ranking.add_score(snapshot.score)
                recorded = True

            renderer.draw(screen, snapshot)
            pygame.display.flip()
            clock.tick(args.fps)
    finally:
        pygame.quit()

    for place, entry in enumerate(ranking.get_ranking(), start=1):
        print(f"{place:2d}. {entry.score}")


if __name__ == "__main__":  # pragma: no cover
    run()
