"""首次启动引导页：固定三页，最后一页点「Finish」后标记引导完成。"""
from typing import List

from pydantic import BaseModel, Field

from kaiten.prefs.store import PreferenceStore


class OnboardingPage(BaseModel):
    """单页引导内容。"""
    image: str = Field(..., description="配图文件名（assets 目录下，缺失时不显示）")
    title: str = Field(..., description="标题")
    description: str = Field(..., description="说明")


PAGES: List[OnboardingPage] = [
    OnboardingPage(image="img1.png", title="Welcome", description="Discover the app!"),
    OnboardingPage(image="img2.png", title="Features", description="Explore functionalities."),
    OnboardingPage(image="img3.png", title="Get Started", description="Let's begin!"),
]


class OnboardingPager:
    """翻页状态：Back / Next / Finish。"""

    def __init__(self, prefs: PreferenceStore, pages: List[OnboardingPage] = PAGES):
        self._prefs = prefs
        self.pages = pages
        self.index = 0

    @property
    def page(self) -> OnboardingPage:
        return self.pages[self.index]

    @property
    def can_go_back(self) -> bool:
        return self.index > 0

    @property
    def is_last(self) -> bool:
        return self.index >= len(self.pages) - 1

    def next(self) -> OnboardingPage:
        if not self.is_last:
            self.index += 1
        return self.page

    def back(self) -> OnboardingPage:
        if self.can_go_back:
            self.index -= 1
        return self.page

    def finish(self) -> None:
        self._prefs.complete_onboarding()
