"""Command-line entry point that opens the game window."""

from __future__ import annotations

import os
import sys
from typing import Optional, Sequence

from cubcaster.errors import CubError
from cubcaster.game import Game, Key
from cubcaster.scene import load_scene

USAGE = "Wrong input. Usage (cubcaster ./maps/x.cub)"
TITLE = "Mini-Map"


def _present(pygame, screen, game: Game) -> None:
    canvas = game.render()
    surface = pygame.image.frombuffer(
        canvas.to_rgb_bytes(), (canvas.width, canvas.height), "RGB"
    )
    screen.blit(surface, (0, 0))
    pygame.display.flip()


def _run(game: Game) -> int:
    os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
    import pygame

    keymap = {
        pygame.K_w: Key.W,
        pygame.K_a: Key.A,
        pygame.K_s: Key.S,
        pygame.K_d: Key.D,
        pygame.K_ESCAPE: Key.ESCAPE,
        pygame.K_LEFT: Key.LEFT,
        pygame.K_RIGHT: Key.RIGHT,
    }
    pygame.init()
    try:
        screen = pygame.display.set_mode((game.canvas.width, game.canvas.height))
        pygame.display.set_caption(TITLE)
        pygame.key.set_repeat(200, 30)
        _present(pygame, screen, game)
        while True:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                return 0
            if event.type == pygame.KEYDOWN and event.key in keymap:
                if not game.handle_key(keymap[event.key]):
                    return 0
                _present(pygame, screen, game)
    finally:
        pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Load the scene named on the command line and play it."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print(USAGE)
        return 1
    try:
        game = Game(load_scene(args[0]))
    except CubError as exc:
        print(exc, file=sys.stderr)
        return exc.exit_status
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    return _run(game)


if __name__ == "__main__":
    sys.exit(main())