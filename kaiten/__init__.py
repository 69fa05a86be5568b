"""Kaiten 客户端：引导页、登录注册、主题与卡片列表。"""
__version__ = "0.1.0"
