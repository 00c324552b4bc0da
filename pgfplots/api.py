from __future__ import annotations

from typing import Iterable, Union

from pgfplots.axis import Axis
from pgfplots.picture import Picture, PictureKey
from pgfplots.plot import Plot2D


def picture(*items: Union[Axis, Plot2D], keys: Iterable[str] = ()) -> Picture:
    """Build a picture from axes and plots; each plot gets its own axis."""
    result = Picture()
    for item in items:
        if isinstance(item, Plot2D):
            result.axes.append(Axis.from_plot(item))
        elif isinstance(item, Axis):
            result.axes.append(item)
        else:
            raise TypeError(f"expected Axis or Plot2D, got {type(item)!r}")
    for key in keys:
        result.add_key(PictureKey.custom(key))
    return result
