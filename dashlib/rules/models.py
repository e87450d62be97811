from pydantic import BaseModel, Field


class FormattingRules(BaseModel):
    locale: str = "en-US"
    currency: str = Field(default="USD", min_length=3, max_length=3)


class ChartRules(BaseModel):
    y_axis_step: int = Field(default=1000, gt=0)


class DebounceRules(BaseModel):
    default_delay_ms: int = Field(default=300, ge=0)


class DashRules(BaseModel):
    formatting: FormattingRules = Field(default_factory=FormattingRules)
    charts: ChartRules = Field(default_factory=ChartRules)
    debounce: DebounceRules = Field(default_factory=DebounceRules)
