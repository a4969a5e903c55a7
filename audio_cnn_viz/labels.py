"""
Class Labels
============
Static ESC-50 class-name -> emoji lookup used by the prediction list.
"""
from __future__ import annotations


DEFAULT_EMOJI = "📢"

ESC50_EMOJI_MAP: dict[str, str] = {
    # Animals
    "dog": "🐕",
    "rooster": "🐓",
    "pig": "🐖",
    "cow": "🐄",
    "frog": "🐸",
    "cat": "🐈",
    "hen": "🐔",
    "insects": "🐛",
    "sheep": "🐑",
    "crow": "🐦‍⬛",
    # Natural soundscapes & water
    "rain": "🌧️",
    "sea_waves": "🌊",
    "crackling_fire": "🔥",
    "crickets": "🦗",
    "chirping_birds": "🐦",
    "water_drops": "💧",
    "wind": "💨",
    "pouring_water": "🚰",
    "toilet_flush": "🚽",
    "thunderstorm": "⛈️",
    # Human, non-speech
    "crying_baby": "👶",
    "sneezing": "🤧",
    "clapping": "👏",
    "breathing": "😮‍💨",
    "coughing": "😷",
    "footsteps": "👣",
    "laughing": "😂",
    "brushing_teeth": "🪥",
    "snoring": "😴",
    "drinking_sipping": "🥤",
    # Interior / domestic
    "door_wood_knock": "🚪",
    "mouse_click": "🖱️",
    "keyboard_typing": "⌨️",
    "door_wood_creaks": "🚪",
    "can_opening": "🥫",
    "washing_machine": "🧺",
    "vacuum_cleaner": "🧹",
    "clock_alarm": "⏰",
    "clock_tick": "🕰️",
    "glass_breaking": "🥂",
    # Exterior / urban
    "helicopter": "🚁",
    "chainsaw": "🪚",
    "siren": "🚨",
    "car_horn": "📯",
    "engine": "🚗",
    "train": "🚆",
    "church_bells": "🔔",
    "airplane": "✈️",
    "fireworks": "🎆",
    "hand_saw": "🪚",
}


def get_emoji_for_class(class_name: str) -> str:
    return ESC50_EMOJI_MAP.get(class_name, DEFAULT_EMOJI)
