import argparse
import logging
import os
import sys

import numpy as np
import pygame

from .grid import SAMPLE_LAYOUT, SAMPLE_TARGET
from .levels import LEVEL_ORDER

KEY_LEVELS = {pygame.K_1: LEVEL_ORDER[0], pygame.K_2: LEVEL_ORDER[1], pygame.K_3: LEVEL_ORDER[2]}


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="mazegame", description="Play the maze game in a window.")
    parser.add_argument("--level", default="easy", help="easy, medium, hard (or 1-3); unknown values use 12x12")
    parser.add_argument("--seed", type=int, default=None, help="seed for maze generation")
    parser.add_argument("--flat", action="store_true", help="play the fixed 10x9 open/blocked layout")
    parser.add_argument("--verbose", action="store_true", help="log session events")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if os.getenv("SDL_VIDEODRIVER") == "dummy":
        print("Cannot run interactive play with SDL_VIDEODRIVER=dummy.")
        print("Unset SDL_VIDEODRIVER to open a window.")
        return 1

    from .env import GameEnv

    if args.flat:
        env = GameEnv(level=args.level, layout=SAMPLE_LAYOUT, target=SAMPLE_TARGET)
    else:
        env = GameEnv(level=args.level)
    obs, info = env.reset(seed=args.seed)

    pygame.display.set_caption("Maze")
    screen = pygame.display.set_mode((GameEnv.SCREEN_WIDTH, GameEnv.SCREEN_HEIGHT))
    clock = pygame.time.Clock()

    print(env.game_description)
    print(env.user_guide)

    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            if event.type != pygame.KEYDOWN:
                continue

            action = np.array([0, 0, 0])
            if event.key == pygame.K_UP:
                action[0] = 1
            elif event.key == pygame.K_DOWN:
                action[0] = 2
            elif event.key == pygame.K_LEFT:
                action[0] = 3
            elif event.key == pygame.K_RIGHT:
                action[0] = 4
            elif event.key in (pygame.K_h, pygame.K_SPACE):
                action[1] = 1
            elif event.key in (pygame.K_s, pygame.K_LSHIFT, pygame.K_RSHIFT):
                action[2] = 1
            elif event.key == pygame.K_RETURN:
                env.reset()
            elif event.key == pygame.K_n:
                env.session.change_shape()
            elif event.key == pygame.K_ESCAPE:
                env.session.exit_game()
                print(env.session.status)
            elif event.key in KEY_LEVELS:
                env.level = KEY_LEVELS[event.key]
                env.reset()
            elif event.key == pygame.K_q:
                running = False

            if action.any():
                obs, reward, terminated, truncated, info = env.step(action)
                if terminated and info["won"]:
                    print(f"{env.session.status} Time: {info['elapsed']}s, steps: {info['steps']}")
                    print("Press Enter to play again.")

        # Timers run on play time, measured from the frame clock
        env.tick(clock.tick(30))

        frame = np.transpose(env.render(), (1, 0, 2))
        surf = pygame.surfarray.make_surface(frame)
        screen.blit(surf, (0, 0))
        pygame.display.flip()

    env.close()
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\nExiting...")
        sys.exit(0)
