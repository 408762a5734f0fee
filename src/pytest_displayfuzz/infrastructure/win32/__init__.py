from pytest_displayfuzz.infrastructure.win32.fake import FakeWin32, Win32Error

__all__ = ["FakeWin32", "Win32Error"]
