"""
Comparison bench.

Scouts judge prospects relative to players they already know. The bench
holds a handful of reference players with partially-known attributes;
comparing a target against them yields a coarse tier ("clearly better",
"comparable", ...) with a confidence that drops as the shared evidence
thins out.

All functions are pure: the bench and its players are never mutated,
and an invalid add/remove hands back the very same bench.
"""

import logging
import random
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Mapping, Optional, Union

from talentscout.core.attributes import AttributeDomain, AttributeRegistry
from talentscout.core.config import get_config
from talentscout.core.numeric import clamp

logger = logging.getLogger(__name__)


class ComparisonTier(str, Enum):
    """Relative judgment of a target against one bench player."""

    CLEARLY_BETTER = "clearly_better"
    SLIGHTLY_BETTER = "slightly_better"
    COMPARABLE = "comparable"
    SLIGHTLY_WORSE = "slightly_worse"
    CLEARLY_WORSE = "clearly_worse"

    @property
    def distance(self) -> int:
        """Steps away from 'comparable'."""
        return TIER_DISTANCE[self]


TIER_DISTANCE: dict[ComparisonTier, int] = {
    ComparisonTier.COMPARABLE: 0,
    ComparisonTier.SLIGHTLY_BETTER: 1,
    ComparisonTier.SLIGHTLY_WORSE: 1,
    ComparisonTier.CLEARLY_BETTER: 2,
    ComparisonTier.CLEARLY_WORSE: 2,
}


# =============================================================================
# Thresholds
# =============================================================================

CLEAR_DELTA = 3.0
SLIGHT_DELTA = 1.0

OVERLAP_SATURATION = 5  # Shared attributes needed for full overlap credit
KNOWN_SATURATION = 8  # Known bench attributes needed for no sparsity penalty
EMPTY_BENCH_SPARSITY = 0.5
CONFIDENCE_NOISE = 0.1  # Total width, i.e. +/-0.05
MIN_CONFIDENCE = 0.05
MAX_CONFIDENCE = 0.99


NARRATIVES: dict[ComparisonTier, list[str]] = {
    ComparisonTier.CLEARLY_BETTER: [
        "Next to {bench}, {target} is in a different class on the {domain} side.",
        "{target} outstrips {bench} in {domain} terms. The gap is obvious.",
        "Measured against {bench}, {target}'s {domain} level is a clear step higher.",
        "There is no contest in {domain} ability: {target} is well ahead of {bench}.",
        "{bench} would struggle to live with {target} on {domain} qualities.",
    ],
    ComparisonTier.SLIGHTLY_BETTER: [
        "{target} edges {bench} on {domain} ability, if only just.",
        "A small {domain} advantage for {target} over {bench}.",
        "On {domain} terms {target} nudges ahead of {bench}. Not by much.",
        "{target} looks a touch sharper than {bench} in the {domain} department.",
        "Set beside {bench}, {target} comes out marginally ahead on {domain} qualities.",
    ],
    ComparisonTier.COMPARABLE: [
        "{target} and {bench} sit at much the same {domain} level.",
        "Little to separate {target} from {bench} on {domain} ability.",
        "In {domain} terms {target} is a like-for-like match for {bench}.",
        "{target}'s {domain} profile mirrors {bench} closely.",
        "No meaningful {domain} gap between {target} and {bench}.",
    ],
    ComparisonTier.SLIGHTLY_WORSE: [
        "{target} falls a little short of {bench} on {domain} ability.",
        "{bench} has a slight {domain} edge over {target}.",
        "On {domain} qualities {target} trails {bench}, though not by much.",
        "{target} is a fraction behind {bench} in {domain} terms.",
        "A modest {domain} shortfall for {target} when set against {bench}.",
    ],
    ComparisonTier.CLEARLY_WORSE: [
        "{target} is some way off {bench} in {domain} terms.",
        "{bench} is clearly the stronger {domain} player of the two.",
        "The {domain} gap between {bench} and {target} is significant, and it runs the wrong way.",
        "{target} does not come close to {bench} on {domain} ability.",
        "Against {bench}, {target}'s {domain} level looks well short.",
    ],
}


# =============================================================================
# Data Structures
# =============================================================================

@dataclass
class BenchPlayer:
    """A reference player with whatever attributes the scout has perceived."""

    player_id: str
    player_name: str
    perceived_attributes: dict[str, float] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "player_id": self.player_id,
            "player_name": self.player_name,
            "perceived_attributes": dict(self.perceived_attributes),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "BenchPlayer":
        return cls(
            player_id=data["player_id"],
            player_name=data.get("player_name", ""),
            perceived_attributes=dict(data.get("perceived_attributes", {})),
        )


@dataclass
class ComparisonBench:
    """A bounded set of reference players."""

    bench_players: list[BenchPlayer] = field(default_factory=list)
    max_size: int = 8

    @property
    def is_full(self) -> bool:
        return len(self.bench_players) >= self.max_size

    def has_player(self, player_id: str) -> bool:
        return any(bp.player_id == player_id for bp in self.bench_players)

    def to_dict(self) -> dict:
        return {
            "bench_players": [bp.to_dict() for bp in self.bench_players],
            "max_size": self.max_size,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ComparisonBench":
        return cls(
            bench_players=[BenchPlayer.from_dict(bp) for bp in data.get("bench_players", [])],
            max_size=data.get("max_size", get_config().bench_max_size),
        )


@dataclass
class ComparisonResult:
    """Outcome of comparing a target against one bench player."""

    bench_player_id: str
    bench_player_name: str
    domain: str
    tier: ComparisonTier
    mean_delta: float
    confidence: float
    narrative: str
    overlap_count: int = 0


# =============================================================================
# Bench Management
# =============================================================================

def create_comparison_bench() -> ComparisonBench:
    """Create an empty bench at the configured capacity."""
    return ComparisonBench(max_size=get_config().bench_max_size)


def add_to_bench(bench: ComparisonBench, bench_player: BenchPlayer) -> ComparisonBench:
    """
    Add a reference player to the bench.

    A full bench or a player already on it leaves the bench unchanged;
    the caller must remove someone first. Nobody is ever evicted.
    """
    if bench.is_full:
        logger.debug("Bench full (%d), not adding %s", bench.max_size, bench_player.player_id)
        return bench
    if bench.has_player(bench_player.player_id):
        logger.debug("Player %s already on bench", bench_player.player_id)
        return bench
    return replace(bench, bench_players=[*bench.bench_players, bench_player])


def remove_from_bench(bench: ComparisonBench, player_id: str) -> ComparisonBench:
    """Remove a reference player. Unknown ids leave the bench unchanged."""
    if not bench.has_player(player_id):
        return bench
    return replace(
        bench,
        bench_players=[bp for bp in bench.bench_players if bp.player_id != player_id],
    )


# =============================================================================
# Comparison
# =============================================================================

def _domain_key(domain: Union[AttributeDomain, str]) -> str:
    if isinstance(domain, AttributeDomain):
        return domain.value
    return domain.lower()


def filter_by_domain(
    attributes: Mapping[str, float],
    domain: Union[AttributeDomain, str],
) -> dict[str, float]:
    """
    Keep the attributes that belong to a domain.

    A key belongs if it is registered under the domain or if it carries the
    domain name (case-insensitive), e.g. "technicalPassing". When nothing
    matches, the full map is returned so a domain never yields zero signal.
    """
    key = _domain_key(domain)
    registered = {a.name for a in AttributeRegistry.get_all() if a.domain.value == key}
    filtered = {
        name: value
        for name, value in attributes.items()
        if name in registered or key in name.lower()
    }
    return filtered if filtered else dict(attributes)


def classify_delta(delta: float) -> ComparisonTier:
    """Map a mean attribute delta onto a comparison tier."""
    if delta >= CLEAR_DELTA:
        return ComparisonTier.CLEARLY_BETTER
    if delta >= SLIGHT_DELTA:
        return ComparisonTier.SLIGHTLY_BETTER
    if delta <= -CLEAR_DELTA:
        return ComparisonTier.CLEARLY_WORSE
    if delta <= -SLIGHT_DELTA:
        return ComparisonTier.SLIGHTLY_WORSE
    return ComparisonTier.COMPARABLE


def comparison_confidence(overlap_count: int, bench_known_count: int, rng: random.Random) -> float:
    """
    Confidence in a comparison, always strictly between 0 and 1.

    Args:
        overlap_count: Attributes known for both players in the domain
        bench_known_count: Attributes known for the bench player overall
        rng: Session RNG (one draw)

    Returns:
        Confidence in [0.05, 0.99]
    """
    overlap_score = min(overlap_count / OVERLAP_SATURATION, 1.0)
    if bench_known_count == 0:
        sparsity = EMPTY_BENCH_SPARSITY
    else:
        sparsity = min(bench_known_count / KNOWN_SATURATION, 1.0)
    noise = (rng.random() - 0.5) * CONFIDENCE_NOISE
    return clamp(overlap_score * sparsity + noise, MIN_CONFIDENCE, MAX_CONFIDENCE)


def compare_player(
    target_attributes: Mapping[str, float],
    target_name: str,
    bench_player: BenchPlayer,
    domain: Union[AttributeDomain, str],
    rng: random.Random,
) -> ComparisonResult:
    """
    Compare a target's perceived attributes against one bench player.

    Draws from the RNG twice: confidence noise, then the narrative.
    """
    target = filter_by_domain(target_attributes, domain)
    bench = filter_by_domain(bench_player.perceived_attributes, domain)

    shared = [name for name in target if name in bench]
    if shared:
        mean_delta = sum(target[name] - bench[name] for name in shared) / len(shared)
    else:
        mean_delta = 0.0

    tier = classify_delta(mean_delta)
    confidence = comparison_confidence(
        len(shared), len(bench_player.perceived_attributes), rng
    )

    domain_name = _domain_key(domain)
    narrative = rng.choice(NARRATIVES[tier]).format(
        target=target_name,
        bench=bench_player.player_name,
        domain=domain_name,
    )

    return ComparisonResult(
        bench_player_id=bench_player.player_id,
        bench_player_name=bench_player.player_name,
        domain=domain_name,
        tier=tier,
        mean_delta=mean_delta,
        confidence=confidence,
        narrative=narrative,
        overlap_count=len(shared),
    )


def compare_against_bench(
    target_attributes: Mapping[str, float],
    target_name: str,
    bench: ComparisonBench,
    domain: Union[AttributeDomain, str],
    rng: random.Random,
) -> list[ComparisonResult]:
    """Compare a target against every bench player, in bench order."""
    return [
        compare_player(target_attributes, target_name, bp, domain, rng)
        for bp in bench.bench_players
    ]


def find_closest_bench_match(results: list[ComparisonResult]) -> Optional[ComparisonResult]:
    """
    The result nearest to 'comparable'; the earliest wins ties.

    Takes the output of compare_against_bench and draws nothing from the RNG.
    """
    if not results:
        return None
    return min(results, key=lambda r: r.tier.distance)
