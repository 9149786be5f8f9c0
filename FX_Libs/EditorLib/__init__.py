"""
EditorLib - Non-destructive editing model

This module provides the effect stack, the render pipeline that replays it
over the original image, the undo history and the editing session that
ties them together.
"""

from FX_Libs.EditorLib.effect_stack import EffectStack
from FX_Libs.EditorLib.history_log import HistoryEntry, HistoryLog
from FX_Libs.EditorLib.render_pipeline import RenderPipeline, render
from FX_Libs.EditorLib.editing_session import EditingSession

__all__ = [
    "EffectStack",
    "HistoryEntry",
    "HistoryLog",
    "RenderPipeline",
    "render",
    "EditingSession",
]
