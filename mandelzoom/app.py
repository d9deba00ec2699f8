"""
Main application module for the Mandelbrot viewer.

Contains the MandelbrotApp class which handles:
- Window setup and main loop
- User input (click to zoom, R to reset)
- Rendering and display
- Help text overlay
"""

import pygame
from loguru import logger

from .compute import to_rgb8
from .config import ViewerConfig
from .renderer import FrameRenderer
from .view import ViewState


def overlay_lines(view):
    """Help and status text drawn in the top-left corner."""
    return [
        "Left Click: Zoom In",
        "Right Click: Zoom Out",
        "R: Reset",
        f"Zoom: {view.zoom:.1f}x",
        f"Center: ({view.center_real:.6f}, {view.center_imag:.6f})",
    ]


class MandelbrotApp:
    """
    Main application class for the Mandelbrot viewer.

    Handles the pygame window, event loop, and coordinates between the
    view state, the renderer and the display. Every interaction triggers
    a full synchronous re-render before the loop continues.
    """

    CAPTION = "Mandelbrot Zoom"
    FPS = 60

    TEXT_COLOR = (255, 255, 255)
    TEXT_MARGIN = 10
    LINE_HEIGHT = 20
    FONT_SIZE = 20

    LEFT_BUTTON = 1
    RIGHT_BUTTON = 3

    def __init__(self, config=None):
        """
        Initialize the application.

        Args:
            config: ViewerConfig to run with (defaults reproduce the
                classic 800x600 overview)
        """
        self.config = config or ViewerConfig()
        self.width = self.config.width
        self.height = self.config.height

        self.view = ViewState.from_config(self.config)
        self.renderer = FrameRenderer(self.config)

        # Pygame state (initialized in run())
        self.screen = None
        self.clock = None
        self.font = None

        # Display state
        self.frame = None
        self.current_surface = None

        self.running = False

    def run(self):
        """Run the application main loop."""
        self._init_pygame()
        try:
            self._warmup_and_initial_render()

            self.running = True
            while self.running:
                self._handle_events()
                self._draw()
                self.clock.tick(self.FPS)
        finally:
            pygame.quit()

    def _init_pygame(self):
        """Initialize pygame and create window."""
        pygame.init()
        self.screen = pygame.display.set_mode((self.width, self.height))
        pygame.display.set_caption(self.CAPTION)
        self.clock = pygame.time.Clock()
        pygame.font.init()
        self.font = pygame.font.SysFont(None, self.FONT_SIZE)

    def _warmup_and_initial_render(self):
        """Warm up JIT and do initial render."""
        pygame.display.set_caption("Compiling (first run only)...")
        self.renderer.warmup()
        self.refresh()
        self._draw()

    def _handle_events(self):
        """Process all pending pygame events."""
        for event in pygame.event.get():
            self.handle_event(event)

    def handle_event(self, event):
        """Apply a single input event to the view."""
        if event.type == pygame.QUIT:
            self.running = False
            return
        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            self.running = False
            return

        # Input is dropped, not queued, while a frame is being computed
        if self.renderer.rendering:
            logger.debug(f"Render in progress, ignoring event {pygame.event.event_name(event.type)}")
            return

        if event.type == pygame.MOUSEBUTTONDOWN:
            if event.button == self.LEFT_BUTTON:
                self.zoom_at(event.pos, zoom_in=True)
            elif event.button == self.RIGHT_BUTTON:
                self.zoom_at(event.pos, zoom_in=False)
        elif event.type == pygame.KEYDOWN and event.key == pygame.K_r:
            self.reset_view()

    def zoom_at(self, pos, zoom_in=True):
        """
        Recenter on the clicked pixel, then zoom in or out by one step.

        At the float64 zoom limit the click is ignored and the view is left
        as it was.

        Args:
            pos: (x, y) pixel position of the click
            zoom_in: True for zoom in, False for zoom out
        """
        x, y = pos
        real, imag = self.view.screen_to_complex(
            x, y, self.width, self.height, self.config.base_range
        )
        try:
            if zoom_in:
                self.view.zoom_in(self.config.zoom_factor)
            else:
                self.view.zoom_out(self.config.zoom_factor)
        except ValueError as e:
            logger.warning(f"Ignoring click: {e}")
            return
        self.view.recenter(real, imag)

        logger.info(f"Zooming to ({real:.6f}, {imag:.6f}) at {self.view.zoom:.1f}x")
        self.refresh()

    def reset_view(self):
        """Handle R: go back to the home view."""
        self.view.reset()
        logger.info("View reset")
        self.refresh()

    def refresh(self):
        """Render the current view and replace the displayed surface."""
        if self.screen is not None:
            pygame.display.set_caption("Computing...")

        self.frame = self.renderer.render(self.view)
        self.current_surface = pygame.surfarray.make_surface(
            to_rgb8(self.frame.pixels).swapaxes(0, 1)
        )

        if self.screen is not None:
            pygame.display.set_caption(self.CAPTION)

    def _draw(self):
        """Draw the current frame."""
        self.screen.fill((0, 0, 0))
        if self.current_surface is not None:
            self.screen.blit(self.current_surface, (0, 0))
        self._draw_overlay()
        pygame.display.flip()

    def _draw_overlay(self):
        for i, line in enumerate(overlay_lines(self.view)):
            text = self.font.render(line, True, self.TEXT_COLOR)
            self.screen.blit(text, (self.TEXT_MARGIN, self.TEXT_MARGIN + i * self.LINE_HEIGHT))


def run(config=None):
    """
    Run the Mandelbrot viewer.

    Args:
        config: ViewerConfig (default settings if omitted)
    """
    app = MandelbrotApp(config)
    try:
        app.run()
    except KeyboardInterrupt:
        logger.info("Interrupted, exiting")
