from tidetimes.tides.series import ExtremeEvent, ExtremeKind, HeightSample, TideSeries

__all__ = ["ExtremeEvent", "ExtremeKind", "HeightSample", "TideSeries"]
