# renderer/preview.py
import numpy as np

def show_preview(image: np.ndarray, scale: int = 2, caption: str = "Path Tracer") -> None:
    """
    Show a finished (height, width, 3) uint8 render in a pygame window.
    Blocks until the window is closed or Escape is pressed.
    """
    # Imported here so headless renders never need a display.
    import pygame

    pygame.init()
    try:
        height, width = image.shape[:2]
        window_width, window_height = width * scale, height * scale
        screen = pygame.display.set_mode((window_width, window_height))
        pygame.display.set_caption(caption)

        # surfarray expects (width, height, 3)
        surf = pygame.surfarray.make_surface(np.transpose(image, (1, 0, 2)))
        surf = pygame.transform.scale(surf, (window_width, window_height))

        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
            screen.blit(surf, (0, 0))
            pygame.display.flip()
            clock.tick(30)
    finally:
        pygame.quit()
