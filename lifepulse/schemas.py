"""
Defines Pydantic schemas for API data validation and serialization.

These schemas determine the shape of the data for API requests and responses.
JSON keys are camelCase on the wire (`tokenBalance`, `recurringPattern`),
while requests may use either camelCase or the snake_case field names.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional, List

from pydantic import BaseModel, EmailStr, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel


def to_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Normalises an aware datetime to naive UTC; naive values are taken as UTC."""
    if value is not None and value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


class CamelModel(BaseModel):
    """Base schema that speaks camelCase JSON."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True
        use_enum_values = True


# --- Enums ---
class ReminderType(str, Enum):
    MEDICINE = "medicine"
    WATER = "water"
    ACTIVITY = "activity"
    APPOINTMENT = "appointment"
    OTHER = "other"


class RecurringPattern(str, Enum):
    DAILY = "daily"
    WEEKDAYS = "weekdays"
    WEEKLY = "weekly"
    MONTHLY = "monthly"


class Sender(str, Enum):
    USER = "user"
    AI = "ai"


class AppointmentStatus(str, Enum):
    SCHEDULED = "scheduled"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class RewardType(str, Enum):
    TOKEN = "token"
    BADGE = "badge"
    TROPHY = "trophy"


# Tracking types whose value is copied onto the HealthStats snapshot as an integer
NUMERIC_TRACKING_TYPES = {"heartRate", "steps", "hydration"}
# Largest value a 32-bit INTEGER snapshot column holds
MAX_NUMERIC_READING = 2**31 - 1


# --- Users & Authentication ---
class UserCreate(CamelModel):
    """Schema for validating new user registration data."""
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)
    email: EmailStr
    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    profile_image: Optional[str] = None


class UserLogin(CamelModel):
    """Schema for validating user login credentials."""
    username: str
    password: str


class GoogleLogin(CamelModel):
    """An ID token issued by Google Sign-In."""
    token: str = Field(..., min_length=1)


class UserProfileUpdate(CamelModel):
    """Schema for updating the profile of the current user."""
    first_name: Optional[str] = Field(None, min_length=1)
    last_name: Optional[str] = Field(None, min_length=1)
    profile_image: Optional[str] = None
    streak_goal: Optional[int] = Field(None, ge=1)


class UserResponse(CamelModel):
    """Schema for formatting user data in API responses (excludes the password hash)."""
    id: int
    username: str
    email: str
    first_name: str
    last_name: str
    profile_image: Optional[str] = None
    google_id: Optional[str] = None
    google_profile_pic: Optional[str] = None
    token_balance: int
    lifetime_tokens: int
    streak: int
    streak_goal: int


class MessageResponse(BaseModel):
    message: str


# --- Health Stats ---
class HealthStatsResponse(CamelModel):
    id: int
    user_id: int
    date: datetime
    blood_pressure: Optional[str] = None
    blood_pressure_status: Optional[str] = None
    heart_rate: Optional[int] = None
    heart_rate_status: Optional[str] = None
    steps: int
    steps_goal: int
    hydration_glasses: int
    hydration_goal: int


# --- Reminders ---
class ReminderCreate(CamelModel):
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    time: datetime
    type: ReminderType
    icon: Optional[str] = None
    completed: bool = False
    recurring: bool = False
    recurring_pattern: Optional[RecurringPattern] = None

    @field_validator("time")
    @classmethod
    def normalise_time(cls, v: datetime) -> datetime:
        return to_naive_utc(v)


class Reminder(CamelModel):
    id: int
    user_id: int
    title: str
    description: Optional[str] = None
    time: datetime
    type: str
    icon: Optional[str] = None
    completed: bool
    recurring: bool
    recurring_pattern: Optional[str] = None


class SnoozeRequest(CamelModel):
    minutes: int = Field(..., gt=0, description="How far to push the reminder, in minutes.")


# --- Chat ---
class ChatMessageCreate(CamelModel):
    content: str = Field(..., min_length=1)
    sender: Sender
    conversation_id: str = Field(..., min_length=1)
    timestamp: Optional[datetime] = None

    @field_validator("timestamp")
    @classmethod
    def normalise_timestamp(cls, v: Optional[datetime]) -> Optional[datetime]:
        return to_naive_utc(v)


class ChatMessage(CamelModel):
    id: int
    user_id: int
    content: str
    sender: str
    timestamp: datetime
    conversation_id: str


class ConversationSummary(CamelModel):
    id: str
    title: str


class CompanionChatRequest(CamelModel):
    message: str
    conversation_id: Optional[str] = None


class CompanionChatResponse(CamelModel):
    """The stored user message and the companion's stored reply."""
    user_message: ChatMessage
    reply: ChatMessage


# --- Appointments ---
class AppointmentCreate(CamelModel):
    type: str = Field(..., min_length=1)
    doctor_name: str = Field(..., min_length=1)
    location: Optional[str] = None
    date: datetime
    duration: int = Field(..., gt=0, description="Length of the visit in minutes.")
    status: AppointmentStatus = Field(AppointmentStatus.SCHEDULED, validate_default=True)

    @field_validator("date")
    @classmethod
    def normalise_date(cls, v: datetime) -> datetime:
        return to_naive_utc(v)


class AppointmentUpdate(CamelModel):
    type: Optional[str] = Field(None, min_length=1)
    doctor_name: Optional[str] = Field(None, min_length=1)
    location: Optional[str] = None
    date: Optional[datetime] = None
    duration: Optional[int] = Field(None, gt=0)
    status: Optional[AppointmentStatus] = None

    @field_validator("date")
    @classmethod
    def normalise_date(cls, v: Optional[datetime]) -> Optional[datetime]:
        return to_naive_utc(v)


class Appointment(CamelModel):
    id: int
    user_id: int
    type: str
    doctor_name: str
    location: Optional[str] = None
    date: datetime
    duration: int
    status: str


# --- Home Remedies ---
class HomeRemedy(CamelModel):
    id: int
    title: str
    description: str
    ailment: str
    ingredients: List[str]
    instructions: str
    rating: Optional[float] = None
    review_count: int


class RemedySuggestionRequest(CamelModel):
    ailment: str = Field(..., min_length=1)


class RemedySuggestion(CamelModel):
    title: str
    ingredients: List[str]
    instructions: str
    effectiveness: int


class RemedySuggestionResponse(CamelModel):
    remedies: List[RemedySuggestion]


# --- Health Tracking ---
class HealthTrackingCreate(CamelModel):
    type: str = Field(..., min_length=1)
    value: str = Field(..., min_length=1)
    notes: Optional[str] = None

    @model_validator(mode="after")
    def check_numeric_value(self):
        """Values copied onto the snapshot as integers must be whole numbers in column range."""
        if self.type in NUMERIC_TRACKING_TYPES:
            try:
                reading = int(self.value.strip())
            except ValueError:
                raise ValueError(f"'{self.type}' readings must be whole numbers")
            if not 0 <= reading <= MAX_NUMERIC_READING:
                raise ValueError(f"'{self.type}' readings must be between 0 and {MAX_NUMERIC_READING}")
        return self


class HealthTracking(CamelModel):
    id: int
    user_id: int
    timestamp: datetime
    type: str
    value: str
    notes: Optional[str] = None


class HealthSuggestionsResponse(CamelModel):
    suggestions: List[str]
    priority: str


# --- Medicine Scans ---
class MedicineScanCreate(CamelModel):
    medicine_name: str = Field(..., min_length=1)
    dosage: Optional[str] = None
    timing: Optional[str] = None
    side_effects: List[str] = []


class MedicineScan(CamelModel):
    id: int
    user_id: int
    medicine_name: str
    dosage: Optional[str] = None
    timing: Optional[str] = None
    side_effects: Optional[List[str]] = []
    scanned_at: datetime


class MedicineAnalysisRequest(CamelModel):
    image: str = Field(..., min_length=1, description="Base64 encoded photo of the package.")


class MedicineAnalysis(CamelModel):
    medicine_name: str
    dosage: str
    purpose: str
    side_effects: List[str]
    warnings: List[str]


# --- Rewards & Achievements ---
class RewardCreate(CamelModel):
    type: RewardType
    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    icon: Optional[str] = None
    acquired_at: Optional[datetime] = None

    @field_validator("acquired_at")
    @classmethod
    def normalise_acquired_at(cls, v: Optional[datetime]) -> Optional[datetime]:
        return to_naive_utc(v)


class Reward(CamelModel):
    id: int
    user_id: int
    type: str
    name: str
    description: Optional[str] = None
    icon: Optional[str] = None
    acquired_at: datetime


class AchievementCreate(CamelModel):
    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    icon: Optional[str] = None
    acquired_at: Optional[datetime] = None

    @field_validator("acquired_at")
    @classmethod
    def normalise_acquired_at(cls, v: Optional[datetime]) -> Optional[datetime]:
        return to_naive_utc(v)


class Achievement(CamelModel):
    id: int
    user_id: int
    name: str
    description: Optional[str] = None
    icon: Optional[str] = None
    acquired_at: datetime


# --- Service Configuration ---
class ServiceConfig(CamelModel):
    ai_provider: str
    ai_status: str
    google_auth_enabled: bool
