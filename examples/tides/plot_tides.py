import logging
import os
from datetime import timedelta

import matplotlib.pyplot as plt

from tidetimes import Coordinate, Location, TideClient
from tidetimes.errors import TideTimesError

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def main():
    client = TideClient(api_key=os.environ["WORLDTIDES_API_KEY"])
    location = Location(
        name="London",
        coordinate=Coordinate(latitude=51.5074, longitude=-0.1278),
    )

    try:
        series = client.fetch_recent_tides(
            location.coordinate, duration=timedelta(days=1)
        )
    except TideTimesError as e:
        logger.error("Could not fetch tides for %s: %s", location.name, e)
        return

    heights = series.to_pandas()
    extremes = series.extremes_to_pandas()

    print(f"Tide extremes for {location.name}")
    for extreme in series.extremes:
        print(
            f"{extreme.timestamp:%H:%M}  {extreme.kind.label:<9}  "
            f"{extreme.height_meters:.2f}m"
        )

    fig, ax = plt.subplots(figsize=(10, 4))
    ax.plot(heights.index, heights["height"], color="tab:blue", alpha=0.8)
    for kind, color in (("high", "tab:red"), ("low", "tab:green")):
        points = extremes[extremes["kind"] == kind]
        ax.scatter(points.index, points["height"], color=color, zorder=3)
    ax.set_title(location.name)
    ax.set_ylabel("Height (m)")
    plt.show()


if __name__ == "__main__":
    main()
