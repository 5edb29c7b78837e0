import logging
import pygame
from catstack_config import CONFIG, validate_config
from catstack_game import Countdown, Game
from catstack_input import TriggerEdge
from catstack_layout import compute_dims
from catstack_logging import setup_default_logging
from catstack_overlay import GameOverModal
from catstack_render import Canvas, Hud, RenderAssets, draw_scene
from catstack_rng import SpritePicker

logger = logging.getLogger(__name__)

COUNTDOWN_EVENT = pygame.USEREVENT + 1
FALLBACK_SIZE = (800, 600)


class PygameCountdown(Countdown):
    def arm(self):
        pygame.time.set_timer(COUNTDOWN_EVENT, 1000)

    def disarm(self):
        pygame.time.set_timer(COUNTDOWN_EVENT, 0)


def recreate_window(size, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode(size, flags, vsync=1)
    except (TypeError, pygame.error):
        return pygame.display.set_mode(size, flags)


def window_size(cfg=CONFIG):
    """Configured size, else the desktop size at startup."""
    if cfg["WINDOW_SIZE"] is not None:
        return tuple(cfg["WINDOW_SIZE"])
    info = pygame.display.Info()
    if info.current_w > 0 and info.current_h > 0:
        return info.current_w, info.current_h
    return FALLBACK_SIZE


class App:
    """Host side: window, clock, event pump and the frame loop."""

    def __init__(self, size=None, cfg=CONFIG):
        pygame.init()
        pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN, pygame.KEYUP,
                                  pygame.MOUSEBUTTONDOWN, COUNTDOWN_EVENT])
        size = size or window_size(cfg)
        self.screen = recreate_window(size)
        pygame.display.set_caption("Cat Stack")
        self.dims = compute_dims(*self.screen.get_size(), cfg=cfg)
        self.assets = RenderAssets(self.dims, cfg)
        self.canvas = Canvas(self.screen)
        self.hud = Hud(self.assets.hud_font)
        self.modal = GameOverModal(self.screen, self.assets.prompt_font, self.assets.hud_font)
        self.trigger = TriggerEdge()
        self.clock = pygame.time.Clock()
        self.cfg = cfg
        self.running = False
        picker = SpritePicker(len(self.assets.images), cfg["SEED"])
        self.game = Game(self.dims, picker.pick, PygameCountdown(),
                         images=self.assets.images, prompt_font=self.assets.prompt_font,
                         on_time=self.hud.set_time, on_score=self.hud.set_score,
                         on_round_over=self.round_over, cfg=cfg)
        logger.info("window %dx%d, %d sprite images", self.dims.width, self.dims.height,
                    len(self.assets.images))

    def stop(self):
        self.running = False

    def round_over(self, score):
        # final scene under the modal; render only, no simulation step
        draw_scene(self.canvas, self.game.state, self.dims, self.assets.images, self.assets.prompt_font)
        self.hud.draw(self.screen)
        if not self.modal.show(score):
            self.stop()
        # the modal drains the queue, so a trigger key-up may never reach us
        self.trigger.reset()

    def handle(self, e):
        if e.type == pygame.QUIT:
            self.stop()
        elif e.type == pygame.KEYDOWN and e.key == pygame.K_ESCAPE:
            self.stop()
        elif e.type == COUNTDOWN_EVENT:
            self.game.tick()
        elif self.trigger.handle(e):
            self.game.trigger(pygame.time.get_ticks())

    def run(self, max_frames=None):
        """Frame loop; returns the number of frames drawn."""
        self.running = True
        frames = 0
        while self.running:
            self.clock.tick(self.cfg["TARGET_FPS"])
            for e in pygame.event.get():
                self.handle(e)
                if not self.running:
                    break
            if not self.running:
                break
            self.game.frame(pygame.time.get_ticks(), self.canvas)
            self.hud.draw(self.screen)
            pygame.display.flip()
            frames += 1
            if max_frames is not None and frames >= max_frames:
                self.stop()
        return frames


def main():
    setup_default_logging(CONFIG["LOG_LEVEL"])
    validate_config(CONFIG)
    try:
        App().run()
    finally:
        pygame.quit()


if __name__ == '__main__':
    main()
