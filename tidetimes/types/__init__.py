from tidetimes.types.geo import Coordinate, Location, TimeWindow

__all__ = ["Coordinate", "Location", "TimeWindow"]
