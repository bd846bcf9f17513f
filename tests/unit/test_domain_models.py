"""
Тесты для доменных моделей: Pair, ProviderPair, PathStep, PricePath

Проверяет:
1. Создание и валидацию моделей Pydantic
2. Immutability (frozen=True) и hashability ключей таблицы
3. Границы fixed-point сумм [0, U128_MAX]
4. Сериализацию/десериализацию JSON
"""

import json

import pytest
from pydantic import ValidationError

from src.core.domain import Pair, PathStep, PricePath, ProviderPair
from src.core.math.fixed_point import FIXED_POINT_PRECISION, U128_MAX


# =============================================================================
# PAIR TESTS
# =============================================================================


class TestPair:
    """Тесты для модели Pair"""

    def test_pair_creation(self) -> None:
        pair = Pair(source="BTC", target="USDT")
        assert pair.source == "BTC"
        assert pair.target == "USDT"
        assert not pair.is_self_pair

    def test_pair_self_pair(self) -> None:
        assert Pair(source="ETH", target="ETH").is_self_pair

    def test_pair_immutable(self) -> None:
        """Pair должна быть immutable (frozen=True)"""
        pair = Pair(source="BTC", target="USDT")
        with pytest.raises(ValidationError):
            pair.source = "ETH"  # type: ignore

    def test_pair_hashable(self) -> None:
        """Равные пары — один ключ словаря"""
        table = {Pair(source="BTC", target="USDT"): 1}
        assert table[Pair(source="BTC", target="USDT")] == 1
        assert Pair(source="USDT", target="BTC") not in table

    def test_pair_sort_key(self) -> None:
        pairs = [
            Pair(source="USDT", target="BTC"),
            Pair(source="BTC", target="USDT"),
            Pair(source="BTC", target="ETH"),
        ]
        assert [p.sort_key() for p in sorted(pairs, key=Pair.sort_key)] == [
            ("BTC", "ETH"),
            ("BTC", "USDT"),
            ("USDT", "BTC"),
        ]

    def test_pair_empty_currency_validation(self) -> None:
        with pytest.raises(ValidationError):
            Pair(source="", target="USDT")


# =============================================================================
# PROVIDER PAIR TESTS
# =============================================================================


class TestProviderPair:
    """Тесты для модели ProviderPair"""

    def test_provider_pair_creation(self) -> None:
        pp = ProviderPair(pair=Pair(source="BTC", target="USDT"), provider="crypto_compare")
        assert pp.pair == Pair(source="BTC", target="USDT")
        assert pp.provider == "crypto_compare"
        assert pp.sort_key() == ("BTC", "USDT", "crypto_compare")

    def test_provider_pair_hashable(self) -> None:
        a = ProviderPair(pair=Pair(source="BTC", target="USDT"), provider="x")
        b = ProviderPair(pair=Pair(source="BTC", target="USDT"), provider="x")
        assert a == b
        assert len({a, b}) == 1

    def test_provider_pair_empty_provider_validation(self) -> None:
        with pytest.raises(ValidationError):
            ProviderPair(pair=Pair(source="BTC", target="USDT"), provider="")


# =============================================================================
# PRICE PATH TESTS
# =============================================================================


class TestPricePath:
    """Тесты для моделей PathStep и PricePath"""

    @pytest.fixture
    def two_hop_path(self) -> PricePath:
        """BTC → ETH → USDT"""
        return PricePath(
            total_cost=35_989_499_100_000_000,
            steps=[
                PathStep(pair=Pair(source="BTC", target="ETH"), provider="p1", cost=15_090_000_000_000),
                PathStep(pair=Pair(source="ETH", target="USDT"), provider="p2", cost=2_384_990_000_000_000),
            ],
        )

    def test_price_path_properties(self, two_hop_path: PricePath) -> None:
        assert two_hop_path.hop_count == 2
        assert two_hop_path.providers == ["p1", "p2"]

    def test_price_path_default_steps(self) -> None:
        """Self-pair: единица, без hops"""
        path = PricePath(total_cost=FIXED_POINT_PRECISION)
        assert path.steps == []
        assert path.hop_count == 0
        assert path.providers == []

    def test_price_path_immutable(self, two_hop_path: PricePath) -> None:
        with pytest.raises(ValidationError):
            two_hop_path.total_cost = 0  # type: ignore

    def test_price_path_amount_bounds(self) -> None:
        """Границы fixed-point: [0, U128_MAX]"""
        assert PricePath(total_cost=0).total_cost == 0
        assert PricePath(total_cost=U128_MAX).total_cost == U128_MAX

        with pytest.raises(ValidationError):
            PricePath(total_cost=-1)

        with pytest.raises(ValidationError):
            PricePath(total_cost=U128_MAX + 1)

    def test_path_step_cost_bounds(self) -> None:
        with pytest.raises(ValidationError):
            PathStep(pair=Pair(source="BTC", target="ETH"), provider="p1", cost=-1)

    def test_price_path_equality(self, two_hop_path: PricePath) -> None:
        copy = PricePath(total_cost=two_hop_path.total_cost, steps=list(two_hop_path.steps))
        assert copy == two_hop_path
        assert PricePath(total_cost=1) != PricePath(total_cost=2)

    def test_price_path_json_serialization(self, two_hop_path: PricePath) -> None:
        """Сериализация PricePath в JSON и обратно"""
        json_str = two_hop_path.model_dump_json()
        data = json.loads(json_str)

        assert data["total_cost"] == 35_989_499_100_000_000
        assert data["steps"][0]["pair"] == {"source": "BTC", "target": "ETH"}
        assert data["steps"][1]["provider"] == "p2"

        restored = PricePath.model_validate_json(json_str)
        assert restored == two_hop_path
