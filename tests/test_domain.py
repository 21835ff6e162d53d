"""Тесты проверки доменной части."""

from emailaddress.modules.domain import is_domain_name


def test_is_domain_name_accepts_plain_names() -> None:
    assert is_domain_name("test.net") is True
    assert is_domain_name("t1est.net") is True
    assert is_domain_name("strange-example.com") is True
    assert is_domain_name("localhost") is True
    assert is_domain_name("123.456") is True


def test_is_domain_name_rejects_bad_structure() -> None:
    assert is_domain_name("") is False
    assert is_domain_name("test.-net") is False
    assert is_domain_name("test-.net") is False
    assert is_domain_name('"test".net') is False
    assert is_domain_name("test..net") is False
    assert is_domain_name(".test.net") is False
    assert is_domain_name("test.net.") is False
    assert is_domain_name("te_st.net") is False
    assert is_domain_name("test .net") is False


def test_is_domain_name_label_length() -> None:
    long_label = "abcdefghijklmnopqrstuvwxyz" * 3
    assert is_domain_name(f"{long_label}.net") is False
    assert is_domain_name(f"{long_label}-test.net") is False
    assert is_domain_name("a" * 63 + ".net") is True
    assert is_domain_name("a" * 64 + ".net") is False


def test_is_domain_name_total_length() -> None:
    domain = ".".join(["a" * 63] * 4)
    assert len(domain) == 255
    assert is_domain_name(domain) is True
    assert is_domain_name(domain + ".a") is False
