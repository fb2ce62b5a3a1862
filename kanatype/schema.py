from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

class Edge(BaseModel):
    target: int = Field(..., ge=1)  # kana index reached after typing `spelling`
    spelling: str = Field(..., min_length=1)
    model_config = ConfigDict(frozen=True)

class PredictionResult(BaseModel):
    """Classification of a romaji buffer against a kana target.

    hit_kana:     kana fully confirmed by the typed romaji
    hit_romaji:   the typed romaji that was accepted (committed + partial)
    rem_romaji:   romaji still to type to finish the whole kana string
    del_romaji:   trailing romaji that extends nothing and should be dropped
    partial_kana: kana unit entered with an incomplete spelling, if any
    """
    hit_kana: str = ""
    hit_romaji: str = ""
    rem_romaji: str = ""
    del_romaji: str = ""
    partial_kana: str = ""
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    @property
    def is_complete(self) -> bool:
        """True when the kana string was typed through with nothing pending or dropped."""
        return not self.partial_kana and not self.rem_romaji and not self.del_romaji
