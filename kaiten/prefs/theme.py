"""界面主题：固定的三套配色，未知名称回退到 light。"""
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ThemeName(str, Enum):
    """可选主题。"""
    LIGHT = "light"
    DARK = "dark"
    BLUE = "blue"


class Theme(BaseModel):
    """一套配色（十六进制颜色）。"""
    background_color: str = Field(..., description="背景色")
    text_color: str = Field(..., description="文字色")
    button_color: str = Field(..., description="按钮色")
    button_text_color: str = Field(..., description="按钮文字色")

    model_config = ConfigDict(frozen=True)


THEMES = {
    ThemeName.LIGHT: Theme(
        background_color="#ffffff",
        text_color="#000000",
        button_color="#007aff",
        button_text_color="#ffffff",
    ),
    ThemeName.DARK: Theme(
        background_color="#000000",
        text_color="#ffffff",
        button_color="#8e8e93",
        button_text_color="#000000",
    ),
    ThemeName.BLUE: Theme(
        background_color="#007aff",
        text_color="#007aff",
        button_color="#007aff",
        button_text_color="#ffffff",
    ),
}

# 设置页展示顺序与标题
THEME_CHOICES = [
    (ThemeName.LIGHT, "Light"),
    (ThemeName.DARK, "Dark"),
    (ThemeName.BLUE, "Blue"),
]


def resolve(name: object) -> ThemeName:
    """任意值转为合法主题名，无法识别时为 light。"""
    if isinstance(name, ThemeName):
        return name
    if not isinstance(name, str):
        return ThemeName.LIGHT
    try:
        return ThemeName(name)
    except ValueError:
        return ThemeName.LIGHT


def get_theme(name: object) -> Theme:
    return THEMES[resolve(name)]


def stylesheet(theme: Theme) -> str:
    """生成 Qt 样式表。"""
    return f"""
        QWidget {{
            background: {theme.background_color};
            color: {theme.text_color};
        }}
        QPushButton {{
            background: {theme.button_color};
            color: {theme.button_text_color};
            border: none;
            border-radius: 8px;
            padding: 8px;
        }}
        QPushButton:disabled {{
            background: #c7c7cc;
        }}
        QLineEdit, QTextEdit, QComboBox, QListWidget {{
            border: 1px solid #c7c7cc;
            border-radius: 6px;
            padding: 4px;
        }}
    """
