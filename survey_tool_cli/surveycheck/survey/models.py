"""Typed survey configuration model.

Mirrors the configuration format of the Survey Tool application. Built from
documents that already passed the config check; the editor commands that
will mutate it are not exposed on the command line yet.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class SurveyType(str, Enum):
    SURVEY = "SURVEY"
    QUIZ = "QUIZ"


class DataQuestionType(str, Enum):
    NAME = "NAME"
    EMAIL = "EMAIL"
    PHONE = "PHONE"
    CUSTOM = "CUSTOM"
    NICKNAME = "NICKNAME"
    AGE = "AGE"
    BIRTHDAY = "BIRTHDAY"


class DateTimeType(str, Enum):
    DATE = "DATE"
    TIME = "TIME"
    DATETIME = "DATETIME"


class RatingSymbol(str, Enum):
    STAR = "STAR"
    HEART = "HEART"
    LIKE = "LIKE"
    SMILE = "SMILE"
    NUMBER = "NUMBER"


class RatingColorGradient(str, Enum):
    NONE = "NONE"
    RED2GREEN = "RED2GREEN"


class LeaderboardSettings(BaseModel):
    """Leaderboard configuration details."""

    show_scores: bool = True
    show_placeholder: bool = True
    limit: int = Field(default=10, ge=1)


class ScoreSettings(BaseModel):
    """Global scoring options for a survey/quiz."""

    show_question_scores: bool = False
    show_leaderboard: bool = True
    leaderboard: LeaderboardSettings = Field(default_factory=LeaderboardSettings)


class ChoiceItem(BaseModel):
    title: str
    score: int | None = None
    correct: bool = False


class LikertStatement(BaseModel):
    title: str
    score: int | None = None
    correct_choice: str | None = None


class _ContentBase(BaseModel):
    model_config = ConfigDict(extra="ignore")

    title: str
    required: bool = False


class TextQuestion(_ContentBase):
    """Free-text question."""

    type: Literal["TEXT"] = "TEXT"
    multiline: bool = False
    pattern: str | None = None
    score: int | None = None
    correct_answer: str | None = None
    correct_answer_pattern: str | None = None
    correct_answer_list: list[str] | None = None


class ChoiceQuestion(_ContentBase):
    """Choice-based question."""

    type: Literal["CHOICE"] = "CHOICE"
    multiple: bool = False
    limit: int = 1
    dropdown: bool = False
    horizontal: bool = False
    choices: list[ChoiceItem] = Field(default_factory=list)


class DataQuestion(_ContentBase):
    """Question capturing a participant's details."""

    type: Literal["DATA"] = "DATA"
    data_type: DataQuestionType
    validation_pattern: str | None = None
    use_for_leaderboard: bool = False


class DateTimeQuestion(_ContentBase):
    type: Literal["DATETIME"] = "DATETIME"
    input_type: DateTimeType = DateTimeType.DATETIME
    initial_selected_time: str | None = None
    initial_selected_date: str | None = None
    score: int | None = None
    correct_time_answer: str | None = None
    correct_date_answer: str | None = None


class RatingQuestion(_ContentBase):
    """Numeric rating question."""

    type: Literal["RATING"] = "RATING"
    level: int = 5
    symbol: RatingSymbol = RatingSymbol.STAR
    color_gradient: RatingColorGradient = RatingColorGradient.NONE


class SliderQuestion(_ContentBase):
    type: Literal["SLIDER"] = "SLIDER"
    range: bool = False
    start: float
    end: float
    steps: int = 0
    show_decimals: bool = False
    unit: str | None = None
    score: int | None = None
    correct_answer: float | None = None


class LikertQuestion(_ContentBase):
    """Likert scale question."""

    type: Literal["LIKERT"] = "LIKERT"
    choices: list[str] = Field(default_factory=list)
    statements: list[LikertStatement] = Field(default_factory=list)


class InformationBlock(_ContentBase):
    type: Literal["INFORMATION"] = "INFORMATION"
    description: str | None = None
    image: str | None = None


SurveyPageContent = Annotated[
    Union[
        TextQuestion,
        ChoiceQuestion,
        DataQuestion,
        DateTimeQuestion,
        RatingQuestion,
        SliderQuestion,
        LikertQuestion,
        InformationBlock,
    ],
    Field(discriminator="type"),
]


class SurveyPage(BaseModel):
    """A single page in the survey."""

    title: str | None = None
    description: str | None = None
    image: str | None = None
    content: list[SurveyPageContent] = Field(default_factory=list)

    def add_content(self, content: SurveyPageContent) -> None:
        self.content.append(content)

    def remove_content(self, index: int) -> None:
        del self.content[index]


class SurveyConfig(BaseModel):
    """Root configuration model describing a single survey or quiz."""

    title: str
    description: str
    type: SurveyType = SurveyType.SURVEY
    image: str | None = None
    score: ScoreSettings = Field(default_factory=ScoreSettings)
    pages: list[SurveyPage] = Field(default_factory=list)

    def add_page(self, page: SurveyPage) -> None:
        self.pages.append(page)

    def remove_page(self, index: int) -> None:
        del self.pages[index]

    @classmethod
    def from_documents(cls, documents: list[Any]) -> SurveyConfig:
        """Build the model from parsed documents: header first, then pages.

        Expects documents that passed the config check; anything else may
        raise pydantic's ValidationError.
        """
        if not documents:
            raise ValueError("No documents: a survey needs at least a header")
        header, *pages = documents
        config = cls.model_validate(header)
        for page in pages:
            config.add_page(SurveyPage.model_validate(page))
        return config
