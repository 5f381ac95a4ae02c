from pydantic import model_validator
from pydantic.alias_generators import to_camel
from typing import Optional
from datetime import datetime
from pollverify.schemas.base import CamelModel, StoreInt


class AccessibilityPreferenceCreate(CamelModel):
    voter_id: StoreInt
    visual_assistance: bool = False
    hearing_assistance: bool = False
    mobility_assistance: bool = False
    language_preference: str = "english"
    other_needs: Optional[str] = None


class AccessibilityPreferenceUpdate(CamelModel):
    """Partial update; only the fields present in the request are applied"""
    voter_id: Optional[StoreInt] = None
    visual_assistance: Optional[bool] = None
    hearing_assistance: Optional[bool] = None
    mobility_assistance: Optional[bool] = None
    language_preference: Optional[str] = None
    other_needs: Optional[str] = None

    @model_validator(mode="after")
    def reject_null_required_fields(self):
        # Only otherNeeds may be cleared; the rest can be omitted but not nulled
        for field in ("voter_id", "visual_assistance", "hearing_assistance", "mobility_assistance", "language_preference"):
            if field in self.model_fields_set and getattr(self, field) is None:
                raise ValueError(f"{to_camel(field)} cannot be null")
        return self


class AccessibilityPreferenceResponse(CamelModel):
    id: int
    voter_id: int
    visual_assistance: bool
    hearing_assistance: bool
    mobility_assistance: bool
    language_preference: str
    other_needs: Optional[str]
    created_at: datetime
    updated_at: datetime
