"""
链接域名策略测试
"""

import pytest

from skillaudit.core.rules import DomainAllowList


class TestSubstringPolicy:
    """默认的子串匹配策略"""

    @pytest.fixture
    def allow_list(self) -> DomainAllowList:
        return DomainAllowList()

    def test_apple_developer_link_allowed(self, allow_list: DomainAllowList):
        assert allow_list.check("https://developer.apple.com/foo")

    def test_swift_link_allowed(self, allow_list: DomainAllowList):
        assert allow_list.check("https://www.swift.org/documentation/")

    def test_other_domain_rejected(self, allow_list: DomainAllowList):
        assert not allow_list.check("https://example.com")

    def test_domain_in_path_is_accepted(self, allow_list: DomainAllowList):
        """子串匹配会放过路径中出现的域名"""
        assert allow_list.check("https://evil.com/developer.apple.com")


class TestHostPolicy:
    """可选的主机名精确匹配"""

    @pytest.fixture
    def allow_list(self) -> DomainAllowList:
        return DomainAllowList(strict=True)

    def test_exact_and_subdomain_allowed(self, allow_list: DomainAllowList):
        assert allow_list.check("https://apple.com/")
        assert allow_list.check("https://developer.apple.com/foo")
        assert allow_list.check("https://www.swift.org:443/docs")

    def test_domain_in_path_rejected(self, allow_list: DomainAllowList):
        assert not allow_list.check("https://evil.com/developer.apple.com")

    def test_lookalike_host_rejected(self, allow_list: DomainAllowList):
        assert not allow_list.check("https://notapple.com/")
        assert not allow_list.check("https://apple.com.evil.net/")

    def test_substring_check_still_available(self, allow_list: DomainAllowList):
        assert allow_list.is_allowed("https://evil.com/developer.apple.com")


def test_custom_domains():
    allow_list = DomainAllowList(["example.org"])
    assert allow_list.check("https://example.org/x")
    assert not allow_list.check("https://developer.apple.com/")
