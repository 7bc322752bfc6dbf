from datetime import date
from typing import Any, Dict, List, Literal, Optional
from pydantic import BaseModel, Field, ConfigDict

TravelStyle = Literal["relaxed", "balanced", "active"]
ScheduleCategory = Literal["transport", "sightseeing", "food", "accommodation", "activity"]
TravelStatus = Literal["planning", "confirmed", "completed"]


class _CamelModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


# ------- Request models -------
class PlanRequest(_CamelModel):
    destination: str = ""
    departure: Optional[str] = None
    arrival: Optional[str] = None
    start_date: date = Field(..., alias="startDate")
    end_date: date = Field(..., alias="endDate")
    member_count: int = Field(..., ge=1, alias="memberCount")
    budget: int = Field(..., ge=0)
    interests: List[str] = Field(default_factory=list)
    travel_style: TravelStyle = Field("balanced", alias="travelStyle")
    description: str = ""
    ai_suggest_destination: bool = Field(False, alias="aiSuggestDestination")


class RecommendationRequest(_CamelModel):
    destination: str
    region: Optional[str] = None
    interests: List[str] = Field(default_factory=list)
    budget: str = ""
    travel_style: str = Field("balanced", alias="travelStyle")
    group_size: int = Field(1, ge=1, alias="groupSize")
    duration: int = Field(1, ge=1)
    custom_note: Optional[str] = Field(None, alias="customNote")


class ExtractNamesRequest(_CamelModel):
    image_base64: str = Field("", alias="imageBase64")


# ------- Plan models -------
class ScheduleItem(BaseModel):
    time: str
    title: str
    location: str
    description: str
    category: ScheduleCategory


class ScheduleDay(BaseModel):
    date: str
    day: str
    items: List[ScheduleItem] = Field(default_factory=list)


class PlaceSuggestion(BaseModel):
    name: str
    category: str
    rating: float
    description: str


class BudgetBreakdown(BaseModel):
    transportation: int = 0
    accommodation: int = 0
    food: int = 0
    activities: int = 0


class TravelRecommendations(_CamelModel):
    must_visit: List[str] = Field(default_factory=list, alias="mustVisit")
    local_food: List[str] = Field(default_factory=list, alias="localFood")
    tips: List[str] = Field(default_factory=list)


class GeneratedPlan(BaseModel):
    schedule: List[ScheduleDay] = Field(default_factory=list)
    places: List[PlaceSuggestion] = Field(default_factory=list)
    budget: BudgetBreakdown = BudgetBreakdown()
    recommendations: TravelRecommendations = TravelRecommendations()


# ------- Stored travels -------
class TravelCreate(_CamelModel):
    title: str = Field(..., min_length=1)
    destination: str = Field(..., min_length=1)
    start_date: date = Field(..., alias="startDate")
    end_date: date = Field(..., alias="endDate")
    member_count: int = Field(1, ge=1, alias="memberCount")
    budget: int = Field(0, ge=0)
    interests: List[str] = Field(default_factory=list)
    travel_style: str = Field("balanced", alias="travelStyle")
    description: str = ""
    schedule: List[Dict[str, Any]] = Field(default_factory=list)
    places: List[Dict[str, Any]] = Field(default_factory=list)
    budget_breakdown: Optional[BudgetBreakdown] = Field(None, alias="budgetBreakdown")


class TravelUpdate(_CamelModel):
    title: Optional[str] = None
    destination: Optional[str] = None
    start_date: Optional[date] = Field(None, alias="startDate")
    end_date: Optional[date] = Field(None, alias="endDate")
    member_count: Optional[int] = Field(None, ge=1, alias="memberCount")
    budget: Optional[int] = Field(None, ge=0)
    interests: Optional[List[str]] = None
    travel_style: Optional[str] = Field(None, alias="travelStyle")
    description: Optional[str] = None
    status: Optional[TravelStatus] = None
    schedule: Optional[List[Dict[str, Any]]] = None
    places: Optional[List[Dict[str, Any]]] = None
    budget_breakdown: Optional[BudgetBreakdown] = Field(None, alias="budgetBreakdown")


class Travel(_CamelModel):
    id: str
    title: str
    destination: str
    duration: str
    dates: str
    start_date: date = Field(..., alias="startDate")
    end_date: date = Field(..., alias="endDate")
    description: str = ""
    image: str = ""
    status: TravelStatus = "planning"
    member_count: int = Field(..., alias="memberCount")
    budget: int
    interests: List[str] = Field(default_factory=list)
    travel_style: str = Field("balanced", alias="travelStyle")
    schedule: List[Dict[str, Any]] = Field(default_factory=list)
    places: List[Dict[str, Any]] = Field(default_factory=list)
    budget_breakdown: BudgetBreakdown = Field(default_factory=BudgetBreakdown, alias="budgetBreakdown")
    created_at: str = Field(..., alias="createdAt")
    updated_at: str = Field(..., alias="updatedAt")
