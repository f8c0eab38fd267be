from dwell.types import Rect, TextureId
from game.factories.witch import create_blue_witch, witch_anchor


class FakeAssets:
    def __init__(self):
        self.paths = []

    def load(self, path):
        self.paths.append(path)
        return TextureId(len(self.paths))


def test_witch_poses():
    assets = FakeAssets()

    witch = create_blue_witch(assets, 1920, 1080)

    assert [p.name for p in witch.poses] == ["idle", "charge", "run"]
    assert [len(p.animation) for p in witch.poses] == [6, 5, 8]
    assert assets.paths == [
        "assets/Blue_witch/B_witch_idle.png",
        "assets/Blue_witch/B_witch_charge.png",
        "assets/Blue_witch/B_witch_run.png",
    ]
    assert [p.animation.texture_id for p in witch.poses] == [1, 2, 3]


def test_witch_starts_charging():
    witch = create_blue_witch(FakeAssets(), 1920, 1080)

    assert witch.pose.name == "charge"
    assert witch.animation.frame_duration == 1.0 / 12.0


def test_witch_placement():
    witch = create_blue_witch(FakeAssets(), 1920, 1080)

    idle, charge, run = (p.dest for p in witch.poses)
    assert idle == Rect(-40, 468, 336, 504)
    assert charge == Rect(-124, 468, 504, 504)
    assert run == idle


def test_witch_frames_follow_sheet_layout():
    witch = create_blue_witch(FakeAssets(), 1920, 1080)

    charge = witch.poses[1].animation
    assert charge.frames[4] == Rect(0, 192, 48, 48)


def test_anchor():
    assert witch_anchor(1920, 1080) == (128.0, 720.0)
