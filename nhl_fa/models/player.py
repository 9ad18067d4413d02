"""Free agent projection model."""

from typing import Literal

from pydantic import AliasGenerator, BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

Position = Literal["C", "LW", "RW", "D", "G"]
ContractType = Literal["UFA", "RFA"]
ValueTier = Literal["Bargain", "Fair Deal", "Overpay"]

VALUE_TIERS: tuple[str, ...] = ("Bargain", "Fair Deal", "Overpay")

GOALIE_FIELDS = ("save_percentage", "goals_against_average")
SKATER_FIELDS = ("points_per_game", "recent_production")

VALUE_ASSESSMENTS = {
    "Bargain": (
        "Projected to outperform this contract at {value_per_gar} per goal above "
        "replacement. Strong value for the acquiring team."
    ),
    "Fair Deal": (
        "Contract is in line with expected production at {value_per_gar} per goal "
        "above replacement."
    ),
    "Overpay": (
        "Projected cost of {value_per_gar} per goal above replacement exceeds the "
        "expected on-ice value."
    ),
}
DEFAULT_ASSESSMENT = (
    "Costs {value_per_gar} per goal above replacement. Not enough information "
    "to grade this contract."
)


def assess_value(value_tier: str | None, value_per_gar: float | None) -> str:
    """Narrative summary for a value tier."""
    amount = f"${value_per_gar:.2f}M" if value_per_gar is not None else "N/A"
    template = VALUE_ASSESSMENTS.get(value_tier or "", DEFAULT_ASSESSMENT)
    return template.format(value_per_gar=amount)


class Player(BaseModel):
    """A projected free agent contract joined with recent performance."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=AliasGenerator(serialization_alias=to_camel),
    )

    id: int
    name: str
    age: int | None = None
    position: Position
    team: str

    # Projected contract
    contract_type: ContractType = "UFA"
    projected_aav: float = Field(ge=0, allow_inf_nan=False)  # Millions
    projected_term: int = Field(ge=0)

    # Valuation
    value_tier: ValueTier | None = None
    contract_value_score: int | None = Field(
        default=None, ge=0, le=100, serialization_alias="contract_value_score"
    )
    value_per_gar: float | None = None
    value_assessment: str = ""

    # Performance summary
    recent_production: float | None = None
    recent_gar: float | None = None
    points_per_game: float | None = None
    save_percentage: float | None = None
    goals_against_average: float | None = None
    projected_gar_2526: float | None = None

    # Fields holding placeholder values instead of stored ones
    estimated_metrics: tuple[str, ...] = ()

    @model_validator(mode="after")
    def _check_position_fields(self) -> "Player":
        wrong = SKATER_FIELDS if self.is_goalie else GOALIE_FIELDS
        populated = [f for f in wrong if getattr(self, f) is not None]
        if populated:
            raise ValueError(f"{', '.join(populated)} not valid for position {self.position}")
        return self

    @property
    def is_goalie(self) -> bool:
        return self.position == "G"

    @property
    def is_skater(self) -> bool:
        return not self.is_goalie

    @property
    def total_value(self) -> float:
        """Projected total contract value in millions."""
        return self.projected_aav * self.projected_term

    def to_api(self) -> dict:
        """Dump with the camelCase keys the front end reads."""
        return self.model_dump(by_alias=True)
