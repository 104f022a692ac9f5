"""
語言支援模組

目前支援日文 (japanese)。
"""
