# game_loop.py

import pygame
from config import WIDTH, HEIGHT, LETTERBOX_COLOR, LOG_ENABLED, settings_data
from game import Game
from input_adapter import InputAdapter, is_tap, tap_position
from logging_utils import log_debug
from renderer import draw_drawables
from ui import Button, Popup, draw_welcome, draw_score, draw_game_over

WELCOME = "welcome"
PLAYING = "playing"


class App:
    """Screen sequencing around a Game: welcome, credits popup, play."""

    def __init__(self, game=None, popup=None):
        self.game = game if game is not None else Game()
        self.inputs = InputAdapter(self.game)
        self.screen = WELCOME
        self.ready_button = Button((WIDTH/2-100, HEIGHT/2+40, 200, 50), "Ready", 30)
        self.popup = popup if popup is not None else Popup(["Color Gate", "Made by the Color Gate team"])

    def _set_screen(self, screen):
        if LOG_ENABLED:
            log_debug(f"{self.screen} -> {screen}", context="App")
        self.screen = screen

    def handle_event(self, event, window_size):
        if self.screen == WELCOME:
            if is_tap(event) and self.ready_button.is_hovered(tap_position(event, window_size)):
                self._set_screen(PLAYING)
                self.popup.show()
            return

        if self.popup.visible:
            if is_tap(event):
                self._dismiss_popup()
            return

        self.inputs.handle_event(event, window_size)

    def _dismiss_popup(self):
        self.popup.hide()
        if not self.game.running:
            self.game.start_or_restart()

    def update(self):
        if self.popup.expired():
            self._dismiss_popup()
        return self.game.step()

    def draw(self, surf):
        if self.screen == WELCOME:
            draw_welcome(surf, self.ready_button)
            return
        draw_drawables(surf, self.game.get_drawables())
        draw_score(surf, self.game.score)
        if self.game.game_over:
            draw_game_over(surf, self.game.score)
        self.popup.draw(surf)


def process_events(app, window_size):
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            return False
        app.handle_event(event, window_size)
    return True

def render_game(app, screen, game_surface, x_offset, y_offset):
    app.draw(game_surface)
    screen.fill(LETTERBOX_COLOR)
    screen.blit(game_surface, (x_offset, y_offset))
    pygame.display.flip()

def run_game():
    pygame.init()
    try:
        clock = pygame.time.Clock()
        screen = pygame.display.set_mode((WIDTH, HEIGHT), pygame.RESIZABLE)
        pygame.display.set_caption("Color Gate")
        game_surface = pygame.Surface((WIDTH, HEIGHT))
        app = App()
        running = True

        while running:
            # Re-read FPS each frame
            clock.tick(settings_data["FPS"])

            w, h = screen.get_size()
            x_off = (w - WIDTH) // 2
            y_off = (h - HEIGHT) // 2

            running = process_events(app, (w, h))
            app.update()
            render_game(app, screen, game_surface, x_off, y_off)
    finally:
        pygame.quit()

if __name__ == "__main__":
    run_game()
