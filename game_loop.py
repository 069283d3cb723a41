# game_loop.py

import pygame

from config import WIDTH, HEIGHT, settings_data
from galaxy import Galaxy
from logging_utils import log_debug


def process_events():
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            return False
    return True


def render_galaxy(galaxy, screen):
    galaxy.draw(screen)
    pygame.display.flip()


def run_galaxy(galaxy=None):
    pygame.init()
    clock = pygame.time.Clock()
    screen = pygame.display.set_mode((WIDTH, HEIGHT), pygame.RESIZABLE)
    pygame.display.set_caption("Galaxy")
    galaxy = galaxy if galaxy is not None else Galaxy()
    log_debug("run_galaxy loop start")
    running = True

    while running:
        # Re-read FPS each frame
        FPS = settings_data["FPS"]
        dt = clock.tick(FPS) / 1000.0

        running = process_events()
        galaxy.update(dt)
        render_galaxy(galaxy, screen)

    log_debug("run_galaxy loop stop")
    pygame.quit()


if __name__ == "__main__":
    run_galaxy()
