# dwell/graphics/window.py
import os

import moderngl
import pygame

from dwell.core.settings import AppSettings


class Window:
    """
    Manages the OS Window and OpenGL Context.
    """

    def __init__(self, settings: AppSettings):
        os.environ.setdefault("SDL_VIDEO_CENTERED", "1")
        if not pygame.get_init():
            pygame.init()

        pygame.display.gl_set_attribute(pygame.GL_CONTEXT_MAJOR_VERSION, 3)
        pygame.display.gl_set_attribute(pygame.GL_CONTEXT_MINOR_VERSION, 3)
        pygame.display.gl_set_attribute(
            pygame.GL_CONTEXT_PROFILE_MASK, pygame.GL_CONTEXT_PROFILE_CORE
        )
        pygame.display.gl_set_attribute(pygame.GL_DOUBLEBUFFER, 1)

        flags = pygame.OPENGL | pygame.DOUBLEBUF
        try:
            pygame.display.set_mode(
                settings.screen_size, flags, vsync=1 if settings.vsync else 0
            )
        except pygame.error:
            # vsync requested but unavailable on this driver
            pygame.display.set_mode(settings.screen_size, flags)
        pygame.display.set_caption(settings.title)

        self.ctx = moderngl.create_context()
        self.ctx.disable(moderngl.DEPTH_TEST | moderngl.CULL_FACE)
        self.ctx.enable(moderngl.BLEND)
        self.ctx.blend_func = moderngl.SRC_ALPHA, moderngl.ONE_MINUS_SRC_ALPHA

        version = self.ctx.version_code
        print(f"[window] OpenGL Context Created: {str(version)[0]}.{str(version)[1:]}")

    def present(self) -> None:
        pygame.display.flip()

    def destroy(self) -> None:
        pygame.quit()
