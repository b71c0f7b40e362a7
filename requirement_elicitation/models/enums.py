from enum import Enum

class Sender(str, Enum):
    USER = "user"
    BOT = "bot"

class TurnType(str, Enum):
    REQUIREMENT = "requirement"
    CLARIFICATION = "clarification"
    GENERAL = "general"

class TurnStatus(str, Enum):
    SUCCESS = "success"
    FALLBACK = "fallback"
    ERROR = "error"

class RequirementType(str, Enum):
    FUNCTIONAL = "functional"
    NON_FUNCTIONAL = "non-functional"

class Priority(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

class RequirementCategory(str, Enum):
    AUTHENTICATION = "Authentication"
    USER_MANAGEMENT = "User Management"
    DATA_PROCESSING = "Data Processing"
    API_INTEGRATION = "API Integration"
    SECURITY = "Security"
    PERFORMANCE = "Performance"
    UI_UX = "UI/UX"
    REPORTING = "Reporting"
    GENERAL = "General"

class ApiStatus(str, Enum):
    CONNECTED = "connected"
    FALLBACK = "fallback"
