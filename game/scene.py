from dwell.assets.server import AssetServer
from dwell.core.settings import AppSettings
from dwell.core.state import RenderState
from game.constants import BACKGROUND_PATH
from game.factories.witch import create_blue_witch


def build_scene(assets: AssetServer, settings: AppSettings) -> RenderState:
    """Background first, then every character in draw order."""
    background = assets.load(BACKGROUND_PATH)
    witch = create_blue_witch(assets, settings.width, settings.height)

    return RenderState(
        background=background,
        textures=assets.registry,
        characters=[witch],
    )
