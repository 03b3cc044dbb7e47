"""ID and slug generators."""

import pytest

from itdocs.shared.utils.generators import generate_cuid, slugify


def test_generate_cuid_is_unique() -> None:
    ids = {generate_cuid() for _ in range(50)}
    assert len(ids) == 50


@pytest.mark.parametrize(
    ("name", "slug"),
    [
        ("After Hour Access", "after-hour-access"),
        ("  Wi-Fi / VPN  ", "wi-fi-vpn"),
        ("ISP #2", "isp-2"),
    ],
)
def test_slugify(name: str, slug: str) -> None:
    assert slugify(name) == slug


def test_slugify_rejects_names_without_letters_or_digits() -> None:
    with pytest.raises(ValueError):
        slugify("!!!")
