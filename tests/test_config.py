from arithcode.config import Config, PRECISION_BITS, TOLERANCE, get_config
from arithcode.ordering import get_order


def test_config_singleton():
    """get_config should return the same singleton instance across calls."""

    c1 = get_config()
    c2 = get_config()
    assert c1 is c2
    assert isinstance(c1, Config)


def test_precision_defaults():
    assert PRECISION_BITS == 52
    assert TOLERANCE == 1e-9
    assert Config.SAFE_PRECISION_BITS < Config.PRECISION_BITS


def test_default_order_resolves():
    assert get_order(Config.DEFAULT_ORDER).name == Config.DEFAULT_ORDER


def test_sample_texts():
    assert Config.SAMPLE_TEXTS == ("ІНФОРМАЦІЯ", "КЛІШОВ_М_Р")
