import pygame


def draw_hex_overlay(screen, points, color, alpha=128, outline=(255, 255, 255)):
    """Draw a semi-transparent filled polygon with a solid outline."""
    xs = [p[0] for p in points]
    ys = [p[1] for p in points]
    left, top = int(min(xs)), int(min(ys))
    surf_width = int(max(xs)) - left + 2
    surf_height = int(max(ys)) - top + 2
    if surf_width <= 0 or surf_height <= 0:
        return

    # Alpha fills need their own SRCALPHA surface
    temp_surf = pygame.Surface((surf_width, surf_height), pygame.SRCALPHA)
    temp_surf_points = [(p[0] - left, p[1] - top) for p in points]
    pygame.draw.polygon(temp_surf, tuple(color) + (alpha,), temp_surf_points)
    screen.blit(temp_surf, (left, top))
    pygame.draw.lines(screen, outline, True, points, 1)
