from hostel_allocation.models.application import ApplicationModel
from hostel_allocation.models.room import RoomModel

__all__ = ["ApplicationModel", "RoomModel"]
