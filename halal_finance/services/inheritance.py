"""Inheritance distribution service.

Simplified fixed-fraction model: parents take 1/6 each, the spouse 1/8 (with
children) or 1/4 (without), and children share what is left with a son taking
twice a daughter's portion. This is not a complete fara'id engine. Residue is
never redistributed (no radd) and over-subscription is never scaled down (no
'awl); whatever the fixed shares leave over is reported as ``unallocated``.
"""
from dataclasses import dataclass, asdict, field
from types import MappingProxyType
from typing import Mapping, Optional

from halal_finance.constants import (
    PARENT_FRACTION,
    SPOUSE_FRACTION_WITH_CHILDREN,
    SPOUSE_FRACTION_WITHOUT_CHILDREN,
    SON_UNITS,
    DAUGHTER_UNITS,
    HEIR_FATHER,
    HEIR_MOTHER,
    HEIR_SPOUSE,
    HEIR_DAUGHTERS,
    HEIR_SONS,
)


@dataclass(frozen=True)
class InheritanceConfig:
    """Fixed fractions used by the distribution."""
    parent_fraction: float = PARENT_FRACTION
    spouse_fraction_with_children: float = SPOUSE_FRACTION_WITH_CHILDREN
    spouse_fraction_without_children: float = SPOUSE_FRACTION_WITHOUT_CHILDREN
    son_units: int = SON_UNITS
    daughter_units: int = DAUGHTER_UNITS

    def to_dict(self) -> dict:
        return asdict(self)


DEFAULT_INHERITANCE_CONFIG = InheritanceConfig()


@dataclass(frozen=True)
class HeirCounts:
    """Surviving heirs. Spouse, father and mother are presence flags (0 or 1)."""
    spouse: int = 0
    sons: int = 0
    daughters: int = 0
    father: int = 0
    mother: int = 0

    @property
    def has_children(self) -> bool:
        return self.sons > 0 or self.daughters > 0

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class InheritanceInput:
    total_wealth: float = 0.0
    debts: float = 0.0
    heirs: HeirCounts = field(default_factory=HeirCounts)


@dataclass(frozen=True)
class InheritanceResult:
    """Distribution of a net estate.

    ``shares`` keeps computation order: Father, Mother, Spouse, Daughters, Sons.
    Children appear as one aggregate line each, labelled with the head count.
    The mapping is read-only.
    """
    net_wealth: float
    shares: Mapping[str, float]
    unallocated: float

    @property
    def total_distributed(self) -> float:
        return sum(self.shares.values())

    def to_dict(self) -> dict:
        return {
            'net_wealth': self.net_wealth,
            'shares': dict(self.shares),
            'total_distributed': self.total_distributed,
            'unallocated': self.unallocated,
        }


class InsufficientEstateError(Exception):
    """Net estate (total wealth minus debts) is zero or negative."""

    def __init__(self, net_wealth: float):
        self.net_wealth = net_wealth
        super().__init__('Net wealth must be positive to calculate inheritance')

    def to_dict(self) -> dict:
        return {
            'error': 'insufficient_estate',
            'message': str(self),
            'net_wealth': self.net_wealth,
        }


@dataclass(frozen=True)
class InheritanceOutcome:
    """Either a result or an error, never both."""
    result: Optional[InheritanceResult] = None
    error: Optional[InsufficientEstateError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def children_label(category: str, count: int) -> str:
    return f'{category} ({count})'


def compute_inheritance(
    inheritance_input: InheritanceInput,
    config: InheritanceConfig = DEFAULT_INHERITANCE_CONFIG,
) -> InheritanceOutcome:
    """Distribute the net estate among the heirs.

    Args:
        inheritance_input: Sanitized wealth, debts and heir counts
        config: Share fractions and child units

    Returns:
        InheritanceOutcome holding an InheritanceResult, or an
        InsufficientEstateError when the net estate is not positive.
    """
    net_wealth = inheritance_input.total_wealth - inheritance_input.debts
    if net_wealth <= 0:
        return InheritanceOutcome(error=InsufficientEstateError(net_wealth))

    heirs = inheritance_input.heirs
    shares = {}
    remaining = net_wealth

    # Parents first
    if heirs.father > 0:
        shares[HEIR_FATHER] = net_wealth * config.parent_fraction
        remaining -= shares[HEIR_FATHER]

    if heirs.mother > 0:
        shares[HEIR_MOTHER] = net_wealth * config.parent_fraction
        remaining -= shares[HEIR_MOTHER]

    if heirs.spouse > 0:
        if heirs.has_children:
            fraction = config.spouse_fraction_with_children
        else:
            fraction = config.spouse_fraction_without_children
        shares[HEIR_SPOUSE] = net_wealth * fraction
        remaining -= shares[HEIR_SPOUSE]

    # Children split the remainder by units
    total_child_units = heirs.sons * config.son_units + heirs.daughters * config.daughter_units
    if total_child_units > 0:
        per_unit = remaining / total_child_units
        if heirs.daughters > 0:
            daughters_total = per_unit * config.daughter_units * heirs.daughters
            shares[children_label(HEIR_DAUGHTERS, heirs.daughters)] = daughters_total
            remaining -= daughters_total
        if heirs.sons > 0:
            sons_total = per_unit * config.son_units * heirs.sons
            shares[children_label(HEIR_SONS, heirs.sons)] = sons_total
            remaining -= sons_total

    return InheritanceOutcome(result=InheritanceResult(
        net_wealth=net_wealth,
        shares=MappingProxyType(shares),
        unallocated=remaining,
    ))
