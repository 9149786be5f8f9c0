"""
Tests for EditingSession.

Covers the commit/undo cycle, effect removal, crop and resize resets and
export naming.
"""

import pytest
from PIL import Image

from FX_Libs.EditorLib.editing_session import EditingSession
from FX_Libs.EditorLib.render_pipeline import RenderPipeline
from FX_Libs.EffectsLib.effect_settings import AppliedEffect
from FX_Libs.errors import InvalidRegion
from FX_Libs.RasterLib.raster_buffer import RasterBuffer


@pytest.fixture
def session(gradient_image):
    return EditingSession(gradient_image)


class TestCommitAndUndo:
    """Tests for commit and undo."""

    def test_new_session_shows_original(self, session, gradient_image):
        assert session.displayed == gradient_image
        assert session.effects == []
        assert len(session.history) == 1
        assert not session.can_undo
        assert session.undo() is None

    def test_rejects_non_buffer(self):
        with pytest.raises(TypeError):
            EditingSession("photo.png")

    def test_commit_updates_display_and_history(self, session, gradient_image):
        sepia = AppliedEffect.create("sepia")

        result = session.commit(sepia)

        assert result == session.displayed == session.render()
        assert result != gradient_image
        assert session.effects == [sepia]
        assert len(session.history) == session.history.index + 1 == 2

    def test_commit_rejects_non_effects(self, session):
        with pytest.raises(TypeError):
            session.commit({"type": "sepia"})
        assert len(session.history) == 1

    def test_undo_round_trip(self, session):
        """Undo after a commit restores the exact previous pixels."""
        session.commit(AppliedEffect.create("contrast", level=40))
        before = session.displayed

        session.commit(AppliedEffect.create("noise", level=60))
        restored = session.undo()

        assert restored == before
        assert restored.pixels == before.pixels
        assert session.effects == [AppliedEffect.create("contrast", level=40)]

    def test_undo_back_to_original(self, session, gradient_image):
        session.commit(AppliedEffect.create("sepia"))
        session.commit(AppliedEffect.create("dither"))

        session.undo()
        assert session.undo() == gradient_image
        assert session.effects == []
        assert session.undo() is None

    def test_commit_after_undo_drops_redo_branch(self, session):
        sepia = AppliedEffect.create("sepia")
        noise = AppliedEffect.create("noise", level=10, seed=1)
        dither = AppliedEffect.create("dither")

        session.commit(sepia)
        session.commit(noise)
        session.undo()
        session.commit(dither)

        assert session.effects == [sepia, dither]
        assert len(session.history) == 3
        assert [entry.effects for entry in session.history.entries] == [(), (sepia,), (sepia, dither)]

    def test_preview_leaves_session_untouched(self, session, gradient_image):
        session.commit(AppliedEffect.create("sepia"))
        displayed = session.displayed

        preview = session.preview(AppliedEffect.create("exposure", level=50))

        assert preview != displayed
        assert session.displayed == displayed
        assert len(session.effects) == 1
        assert len(session.history) == 2

    def test_failed_commit_leaves_state(self, gradient_image):
        from FX_Libs.EffectsLib.effect_registry import EffectRegistry

        def broken(buffer, settings):
            raise ValueError("boom")

        registry = EffectRegistry()
        registry.register("broken", broken)
        session = EditingSession(gradient_image, pipeline=RenderPipeline(registry=registry))

        with pytest.raises(RuntimeError):
            session.commit(AppliedEffect.create("broken"))

        assert session.effects == []
        assert len(session.history) == 1
        assert session.displayed == gradient_image


class TestRemoveEffect:
    """Tests for removing an effect from the stack."""

    def test_remove_middle_equals_never_applied(self, session, gradient_image):
        a = AppliedEffect.create("sepia")
        b = AppliedEffect.create("contrast", level=50)
        c = AppliedEffect.create("exposure", level=-25)
        for effect in (a, b, c):
            session.commit(effect)

        result = session.remove_effect(1)

        assert session.effects == [a, c]
        assert result == RenderPipeline().render(gradient_image, [a, c])
        assert len(session.history) == 5

    def test_remove_can_be_undone(self, session):
        session.commit(AppliedEffect.create("sepia"))
        session.commit(AppliedEffect.create("dither"))
        before = session.displayed

        session.remove_effect(0)
        assert session.undo() == before
        assert len(session.effects) == 2

    def test_remove_out_of_range(self, session):
        session.commit(AppliedEffect.create("sepia"))

        with pytest.raises(IndexError):
            session.remove_effect(1)
        assert len(session.effects) == 1
        assert len(session.history) == 2


class TestCropAndResize:
    """Tests for geometry operations."""

    def test_crop_resets_stack_and_history(self, session):
        session.commit(AppliedEffect.create("sepia"))
        sepia_pixel = session.displayed.get_pixel(5, 5)

        cropped = session.crop(4, 4, 10, 6)

        assert cropped.size == (10, 6)
        assert session.original == cropped == session.displayed
        assert cropped.get_pixel(1, 1) == sepia_pixel
        assert session.effects == []
        assert len(session.history) == 1
        assert not session.can_undo

    @pytest.mark.parametrize(
        "region",
        [(0, 0, 0, 5), (20, 0, 10, 5), (-1, 0, 4, 4), (0, 10, 4, 10)],
    )
    def test_invalid_crop_leaves_state(self, session, region):
        session.commit(AppliedEffect.create("sepia"))
        displayed = session.displayed

        with pytest.raises(InvalidRegion):
            session.crop(*region)

        assert session.displayed == displayed
        assert len(session.effects) == 1
        assert len(session.history) == 2

    def test_resize_resets_stack_and_history(self, session):
        session.commit(AppliedEffect.create("blackwhite"))

        resized = session.resize(12, 8)

        assert resized.size == (12, 8)
        assert session.original == resized
        assert session.effects == []
        assert len(session.history) == 1

    def test_invalid_resize_leaves_state(self, session, gradient_image):
        with pytest.raises(InvalidRegion):
            session.resize(0, 8)
        assert session.original == gradient_image

    def test_load_replaces_image(self, session, red_image):
        session.commit(AppliedEffect.create("sepia"))

        session.load(red_image)

        assert session.original == session.displayed == red_image
        assert session.effects == []
        assert len(session.history) == 1


class TestExport:
    """Tests for export helpers."""

    def test_filename_without_effects(self, session):
        assert session.export_filename() == "edited-image-24x16.png"

    def test_filename_lists_kinds_in_order(self, session):
        session.commit(AppliedEffect.create("sepia"))
        session.commit(AppliedEffect.create("noise", level=10))

        assert session.export_filename() == "edited-image-sepia-noise-24x16.png"

    def test_filename_uses_current_size(self, session):
        session.resize(10, 5)
        assert session.export_filename() == "edited-image-10x5.png"

    def test_export_image(self, session):
        session.commit(AppliedEffect.create("sepia"))

        image = session.export_image()

        assert isinstance(image, Image.Image)
        assert image.mode == "RGBA"
        assert image.size == (24, 16)
        assert image.tobytes() == session.displayed.pixels
