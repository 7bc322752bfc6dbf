"""Error taxonomy shared by the planning pipeline and the HTTP layer."""


class PlannerError(Exception):
    """Base class for all planner failures."""


class ConfigurationError(PlannerError):
    """A required credential or setting is missing."""


class NetworkError(PlannerError):
    """The model endpoint could not be reached or answered with an error status."""


class ParseError(PlannerError):
    """The model reply did not contain parseable JSON."""


class InvalidRequestError(PlannerError):
    """Caller-supplied request is invalid; rejected before any model call."""


class TravelNotFoundError(PlannerError):
    def __init__(self, travel_id: str):
        super().__init__(f"Travel {travel_id} not found")
        self.travel_id = travel_id
