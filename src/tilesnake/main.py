# main.py
import logging

import pygame  # type: ignore

from .config import WIDTH, HEIGHT, CFG
from .game import SnakeGame
from .render import Layout, PygameRenderer
from .timer import PygameScheduler


def handle_event(game: SnakeGame, scheduler: PygameScheduler, event) -> bool:
    """Route one pygame event. Returns False once the window is closed."""
    if event.type == pygame.QUIT:
        return False
    if event.type == pygame.KEYDOWN:
        game.handle_key(pygame.key.name(event.key))
    else:
        scheduler.dispatch(event)
    return True

def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    pygame.init()
    pygame.key.set_repeat()  # key-down is edge triggered
    layout = Layout.for_size(WIDTH, HEIGHT)
    screen = pygame.display.set_mode(layout.size)
    pygame.display.set_caption("Snake")

    scheduler = PygameScheduler()
    game = SnakeGame(PygameRenderer(screen), scheduler, CFG)
    pygame.display.flip()

    running = True
    while running:
        running = handle_event(game, scheduler, pygame.event.wait())
        pygame.display.flip()

    pygame.quit()

if __name__ == "__main__":
    main()
