# renderer.py

import pygame

from config import BACKGROUND_COLOR
from drawables import Circle, Rect


def draw_drawables(surf, shapes):
    """Paint projected shapes onto a pygame surface."""
    surf.fill(BACKGROUND_COLOR)
    for shape in shapes:
        color = pygame.Color(shape.color)
        if isinstance(shape, Circle):
            pygame.draw.circle(surf, color, (round(shape.x), round(shape.y)), shape.radius)
        elif isinstance(shape, Rect):
            if shape.width <= 0 or shape.height <= 0:
                continue
            pygame.draw.rect(surf, color, pygame.Rect(shape.x, shape.y, shape.width, shape.height))
