# ui.py
import time
import pygame
from config import WIDTH, HEIGHT, TEXT_COLOR, settings_data
from managers import Timer

class Button:
    def __init__(self, rect, text, font_size):
        self.rect = pygame.Rect(rect)
        self.text = text
        self.font = pygame.font.SysFont("Arial", font_size)

    def draw(self, surf):
        pygame.draw.rect(surf, (100,100,100), self.rect)
        txt = self.font.render(self.text, True, TEXT_COLOR)
        surf.blit(txt, (self.rect.centerx - txt.get_width()/2,
                        self.rect.centery - txt.get_height()/2))

    def is_hovered(self, pos):
        return self.rect.collidepoint(pos)


class Popup:
    """Credits card that hides itself after POPUP_DURATION or on click."""

    def __init__(self, lines, clock=time.time):
        self.lines = lines
        self.visible = False
        self.timer = None
        self._clock = clock

    def show(self):
        duration = settings_data["POPUP_DURATION"]
        self.timer = Timer(duration, self._clock)
        self.visible = True

    def hide(self):
        self.visible = False
        self.timer = None

    def expired(self):
        return self.visible and self.timer.expired()

    def draw(self, surf):
        if not self.visible:
            return
        font = pygame.font.SysFont("Arial", 26)
        panel = pygame.Rect(WIDTH/2 - 150, HEIGHT/2 - 60, 300, 120)
        pygame.draw.rect(surf, (40, 40, 60), panel)
        y = panel.y + 20
        for line in self.lines:
            txt = font.render(line, True, TEXT_COLOR)
            surf.blit(txt, (WIDTH/2 - txt.get_width()/2, y))
            y += 36


def draw_welcome(surf, ready_button):
    surf.fill((0, 0, 0))
    title = pygame.font.SysFont("Arial", 48).render("Color Gate", True, TEXT_COLOR)
    surf.blit(title, (WIDTH//2 - title.get_width()//2, HEIGHT//4))
    hint = pygame.font.SysFont("Arial", 18).render("Match the gate color to pass through", True, (200, 200, 200))
    surf.blit(hint, (WIDTH//2 - hint.get_width()//2, HEIGHT//4 + 70))
    ready_button.draw(surf)


def draw_score(surf, score):
    txt = pygame.font.SysFont("Arial", 20).render(f"Score: {score}", True, TEXT_COLOR)
    surf.blit(txt, (10, 10))


def draw_game_over(surf, score):
    shade = pygame.Surface((WIDTH, HEIGHT), pygame.SRCALPHA)
    shade.fill((0, 0, 0, 170))
    surf.blit(shade, (0, 0))
    go = pygame.font.SysFont("Arial", 50).render("Game Over", True, TEXT_COLOR)
    sc = pygame.font.SysFont("Arial", 30).render(f"Score: {score}", True, TEXT_COLOR)
    tip = pygame.font.SysFont("Arial", 18).render("Tap to play again", True, (200, 200, 200))
    surf.blit(go, (WIDTH//2 - go.get_width()//2, HEIGHT//2 - 80))
    surf.blit(sc, (WIDTH//2 - sc.get_width()//2, HEIGHT//2))
    surf.blit(tip, (WIDTH//2 - tip.get_width()//2, HEIGHT//2 + 50))
