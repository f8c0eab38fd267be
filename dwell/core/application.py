# dwell/core/application.py
from __future__ import annotations

from typing import Callable, Optional

import pygame

from dwell.assets.registry import TextureRegistry
from dwell.assets.server import AssetServer
from dwell.core.loop import MainLoop
from dwell.core.settings import AppSettings
from dwell.core.state import RenderState
from dwell.graphics.sprite_renderer import SpriteRenderer
from dwell.graphics.texture import GPUTexture
from dwell.graphics.window import Window
from dwell.input.context import InputContext
from dwell.input.handler import InputHandler
from dwell.input.selection import PoseBindings

SceneBuilder = Callable[[AssetServer[GPUTexture], AppSettings], RenderState]


class Application:
    def __init__(self, settings: Optional[AppSettings] = None):
        self.settings = settings or AppSettings()
        self.window: Window | None = None
        self.renderer: SpriteRenderer | None = None
        self.textures: TextureRegistry[GPUTexture] = TextureRegistry()
        self.asset_server: AssetServer[GPUTexture] | None = None
        self.loop: Optional[MainLoop] = None

    def _ensure_window(self) -> None:
        if self.window is not None:
            return

        self.window = Window(self.settings)
        w, h = self.settings.screen_size
        self.renderer = SpriteRenderer(
            self.window.ctx,
            self.textures,
            w,
            h,
            clear_color=self.settings.clear_color,
            present=self.window.present,
        )
        self.asset_server = AssetServer(
            asset_root=self.settings.asset_root,
            registry=self.textures,
            upload=self.renderer.upload,
        )

    def run(
        self,
        build_scene: SceneBuilder,
        context: InputContext,
        selections: PoseBindings,
    ) -> None:
        self._ensure_window()
        assert self.asset_server is not None and self.renderer is not None

        try:
            state = build_scene(self.asset_server, self.settings)

            input_handler = InputHandler()
            input_handler.push_context(context)

            self.loop = MainLoop(
                state,
                self.renderer,
                input_handler,
                selections,
                self.settings.screen_size,
                skip_failed_draws=self.settings.skip_failed_draws,
                clock=pygame.time.Clock(),
                target_fps=self.settings.target_fps,
            )
            self.loop.run()
        finally:
            self.shutdown()

    def shutdown(self) -> None:
        if self.renderer is not None:
            self.renderer.release()
            self.renderer = None
        self.textures.release_all()
        if self.window is not None:
            self.window.destroy()
            self.window = None
