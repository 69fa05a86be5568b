"""界面无关的应用逻辑：引导翻页、顶层界面选择。"""
from kaiten.app.onboarding import PAGES, OnboardingPage, OnboardingPager
from kaiten.app.router import Screen, choose_screen

__all__ = ["PAGES", "OnboardingPage", "OnboardingPager", "Screen", "choose_screen"]
