# game.py
# Frame driver: pygame window, clock and event pump around a World.

import time

import pygame

from pacpy.config import FPS, HUD_HEIGHT, OVERLAY_SECONDS, GameConfig
from pacpy.controls import KeyState
from pacpy.grid import unreachable_floor
from pacpy.render import draw_hud, draw_overlay, draw_world
from pacpy.session import Event, World


def notification_text(note, halted=False):
    if note.kind is Event.GAME_OVER:
        text = f"GAME OVER  SCORE: {note.score}"
        return text + "  (ENTER)" if halted else text
    if note.kind is Event.LEVEL_CLEAR:
        return f"LEVEL CLEAR!  SCORE: {note.score}"
    return None


class PacmanGame:
    def __init__(self, config: GameConfig = None, windowed=True):
        self.config = config or GameConfig()
        self.world = World(self.config)
        missing = unreachable_floor(self.config.player_start, self.world.grid)
        if missing:
            print(f"[map] {len(missing)} floor tiles unreachable from player start, "
                  f"level cannot be cleared: {missing[:8]}")
        pygame.init()
        # the map canvas is fixed; the window is the canvas plus the HUD strip,
        # shrunk if the desktop is smaller
        info = pygame.display.Info()
        self.frame_w = self.world.grid.width
        self.frame_h = self.world.grid.height + HUD_HEIGHT
        desktop_w, desktop_h = info.current_w, info.current_h
        scale = 1.0
        if desktop_w > 0 and desktop_h > 0:
            scale = min(1.0, (desktop_w - 40) / self.frame_w, (desktop_h - 60) / self.frame_h)
        self.window_size = (int(self.frame_w * scale), int(self.frame_h * scale))
        if windowed:
            self.screen = pygame.display.set_mode(self.window_size)
        else:
            self.screen = pygame.display.set_mode(self.window_size, pygame.FULLSCREEN)
        pygame.display.set_caption("PacPy - Single Ghost")
        self.frame = pygame.Surface((self.frame_w, self.frame_h), 0, 32)
        self.canvas = self.frame.subsurface((0, HUD_HEIGHT, self.world.grid.width, self.world.grid.height))
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("Arial", 22)
        self.bigfont = pygame.font.SysFont("Arial", 40)
        self.keys = KeyState()
        # overlay text (GAME OVER / LEVEL CLEAR) shown until overlay_until timestamp
        self.overlay_text = None
        self.overlay_until = 0.0
        print(f"[pacman] initialized (seed={self.config.seed}, windowed={windowed}, "
              f"pellets={self.world.pellets_remaining})")

    def handle_notifications(self, notes):
        for note in notes:
            if note.kind is Event.LIFE_LOST:
                print(f"[pacman] life lost: {self.world.player.name} caught by "
                      f"{self.world.pursuer.name} (lives={note.lives}, score={note.score})")
                continue
            if note.kind is Event.GAME_OVER:
                print(f"[pacman] game over (final score={note.score})")
            else:
                print(f"[pacman] level clear (score={note.score})")
            self.overlay_text = notification_text(note, halted=self.world.halted)
            self.overlay_until = float("inf") if self.world.halted else time.time() + OVERLAY_SECONDS

    def draw(self):
        draw_world(self.canvas, self.world, time.time() * 1000.0)
        self.frame.fill((0, 0, 0), (0, 0, self.frame_w, HUD_HEIGHT))
        draw_hud(self.frame, self.font, self.world, self.frame_w)
        if self.overlay_text and time.time() < self.overlay_until:
            draw_overlay(self.frame, self.bigfont, self.overlay_text)
        if self.window_size == (self.frame_w, self.frame_h):
            self.screen.blit(self.frame, (0, 0))
        else:
            self.screen.blit(pygame.transform.smoothscale(self.frame, self.window_size), (0, 0))
        pygame.display.flip()

    def handle_event(self, ev) -> bool:
        """Apply one pygame event; False means the window should close."""
        if ev.type == pygame.QUIT:
            return False
        if ev.type == pygame.KEYDOWN:
            if ev.key == pygame.K_ESCAPE:
                return False
            if ev.key == pygame.K_RETURN and self.world.halted:
                self.world.restart()
                self.keys.clear()
                self.overlay_text = None
                print("[pacman] restarted")
            else:
                self.keys.press(ev.key)
        elif ev.type == pygame.KEYUP:
            self.keys.release(ev.key)
        elif ev.type == pygame.WINDOWFOCUSLOST:
            # key-up events go to the other window
            self.keys.clear()
        return True

    def run(self):
        running = True
        # reset the clock so startup time is not fed in as a frame
        self.clock.tick()
        while running:
            dt_ms = self.clock.tick(FPS)
            for ev in pygame.event.get():
                if not self.handle_event(ev):
                    running = False
            # held keys survive position resets
            self.world.player.want = self.keys.direction()
            self.handle_notifications(self.world.update(dt_ms))
            self.draw()
        pygame.quit()
