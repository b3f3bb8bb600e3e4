"""Pytest configuration and shared fixtures."""

import pytest

from graphene_sdk import RawOrder, RawStrategy


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests (run offline)")


@pytest.fixture
def weth_usdc_strategy():
    """WETH/USDC strategy with both orders partially filled."""
    return RawStrategy(
        id=340282366920938463463374607431768211534,
        owner="0xc5597eb414b65f4e905af8f45ff95e2e22d1e4b0",
        token0="0x4200000000000000000000000000000000000006",
        token1="0x833589fCD6eDb6E08f4c7C32D4f71b54bdA02913",
        order0=RawOrder(
            y=443317550496385,
            z=870293078344329,
            A=3544951559321984,
            B=4381635731557859,
        ),
        order1=RawOrder(
            y=1020804,
            z=2218082,
            A=1751224833,
            B=13361396492,
        ),
    )


@pytest.fixture
def token_usdc_strategy():
    """18/6 decimals strategy built from lowercase addresses."""
    return RawStrategy(
        id=6465364971497830805804117541203596017740,
        owner="0x2998166a1c40f91617a343071af67183df37f43d",
        token0="0xd386a121991e51eab5e3433bf5b1cf4c8884b47a",
        token1="0x833589fcd6edb6e08f4c7c32d4f71b54bda02913",
        order0=RawOrder(
            y=2419891880285895608,
            z=12965995751316401403,
            A=6367105957745619,
            B=6404666349060909,
        ),
        order1=RawOrder(
            y=500000,
            z=709135,
            A=40123691,
            B=48752896,
        ),
    )


@pytest.fixture
def untouched_sell_strategy():
    """18/18 decimals strategy: order0 untouched (y == z), order1 empty (y == 0)."""
    return RawStrategy(
        id=1020847100762815390390123822295304634374,
        owner="0x069e85d4f1010dd961897dc8c095fbb5ff297434",
        token0="0xd386a121991e51eab5e3433bf5b1cf4c8884b47a",
        token1="0x4200000000000000000000000000000000000006",
        order0=RawOrder(
            y=5272165526976235778,
            z=5272165526976235778,
            A=137699263369260,
            B=785475461108442,
        ),
        order1=RawOrder(
            y=0,
            z=20000000000000000,
            A=15495486182908,
            B=68947006830288,
        ),
    )
