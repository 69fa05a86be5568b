"""引导、登录注册、主标签页界面。"""
from kaiten.ui.window import AppWindow, MainTabs
from kaiten.ui.welcome import WelcomeWidget
from kaiten.ui.login import LoginDialog
from kaiten.ui.register import RegisterDialog
from kaiten.ui.onboarding import OnboardingWidget

__all__ = [
    "AppWindow",
    "MainTabs",
    "WelcomeWidget",
    "LoginDialog",
    "RegisterDialog",
    "OnboardingWidget",
]
