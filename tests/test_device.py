import unittest

from textscrub.device import is_mobile

_DESKTOP_UA = "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 Chrome/120.0 Safari/537.36"
_IPHONE_UA = "Mozilla/5.0 (iPhone; CPU iPhone OS 17_0 like Mac OS X) Mobile/15E148"


class DeviceTests(unittest.TestCase):
    def test_mobile_user_agent(self) -> None:
        self.assertTrue(is_mobile(_IPHONE_UA))
        self.assertTrue(is_mobile("Mozilla/5.0 (Windows Phone 10.0)"))

    def test_desktop_user_agent(self) -> None:
        self.assertFalse(is_mobile(_DESKTOP_UA))
        self.assertFalse(is_mobile(None))

    def test_narrow_viewport_counts_as_mobile(self) -> None:
        self.assertTrue(is_mobile(_DESKTOP_UA, viewport_width=768))
        self.assertFalse(is_mobile(_DESKTOP_UA, viewport_width=1024))
        self.assertTrue(is_mobile(_DESKTOP_UA, viewport_width=900, max_width=1000))
