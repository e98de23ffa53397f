"""User-visible strings. English is the default; Chinese reproduces the classroom labels."""
from __future__ import annotations

from enum import StrEnum


class Language(StrEnum):
    EN = "en"
    ZH = "zh"


STRINGS: dict[Language, dict[str, str]] = {
    Language.EN: {
        "window_title": "Wave Space-Time 3D",
        "title": "3D space-time wave diagram",
        "legend_waveform": "Waveform (position)",
        "legend_vibration": "Vibration (time)",
        "toggle_vibration": "Point vibration",
        "toggle_history": "Waveform history",
        "axis_position": "Position x (m)",
        "axis_time": "Time t (s)",
        "axis_displacement": "Displacement y",
        "play": "Play",
        "pause": "Pause",
        "replay": "Replay",
        "reset": "Reset",
        "drag_hint": "Drag to rotate the view",
        "camera_readout": "Azim: {azim:.0f}°, Elev: {elev:.0f}°",
        "time_readout": "t = {t:.2f}s",
        "time_watermark": "{t:.2f}s",
        "time_bound": "{t:g}s",
        "preset": "{t:g}s",
        "plots_title": "Profiles",
        "snapshot_title": "Snapshot y(x) at t = {t:.2f}s",
        "oscillation_title": "Oscillation y(t) at x = {x:g} m",
        "watch_position": "Watch position:",
        "menu_view": "&View",
        "action_plots": "Companion plots",
        "action_reset_camera": "Reset camera",
    },
    Language.ZH: {
        "window_title": "3D 时空波形图",
        "title": "3D 时空波形图",
        "legend_waveform": "波形 (Position)",
        "legend_vibration": "振动 (Time)",
        "toggle_vibration": "定点振动",
        "toggle_history": "波形历史",
        "axis_position": "位置 x (m)",
        "axis_time": "时间 t (s)",
        "axis_displacement": "位移 y",
        "play": "播放",
        "pause": "暂停",
        "replay": "重播",
        "reset": "重置",
        "drag_hint": "拖拽旋转视角",
        "camera_readout": "Azim: {azim:.0f}°, Elev: {elev:.0f}°",
        "time_readout": "t = {t:.2f}s",
        "time_watermark": "{t:.2f}s",
        "time_bound": "{t:g}s",
        "preset": "{t:g}s",
        "plots_title": "剖面",
        "snapshot_title": "波形 y(x), t = {t:.2f}s",
        "oscillation_title": "振动 y(t), x = {x:g} m",
        "watch_position": "观察位置:",
        "menu_view": "视图(&V)",
        "action_plots": "辅助图表",
        "action_reset_camera": "重置视角",
    },
}

_language: Language = Language.EN


def set_language(code: str | None) -> Language:
    """Select the UI language; unknown codes fall back to English."""
    global _language
    try:
        _language = Language((code or Language.EN).lower())
    except ValueError:
        _language = Language.EN
    return _language


def current_language() -> Language:
    return _language


def text(key: str, **kwargs: object) -> str:
    table = STRINGS[_language]
    template = table.get(key, STRINGS[Language.EN][key])
    return template.format(**kwargs) if kwargs else template
