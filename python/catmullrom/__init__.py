"""Package dedicated to centripetal Catmull-Rom interpolation of point sequences."""

# Curves
from catmullrom.assemble import interpolate as interpolate
from catmullrom.assemble import output_length as output_length
from catmullrom.assemble import window_count as window_count
from catmullrom.curve import CatmullRomCurve as CatmullRomCurve

# Errors
from catmullrom.errors import CatmullRomError as CatmullRomError
from catmullrom.errors import DimensionMismatchError as DimensionMismatchError
from catmullrom.errors import InsufficientPointsError as InsufficientPointsError
from catmullrom.errors import InterpolantRangeError as InterpolantRangeError

# Geometry
from catmullrom.geometry import dot as dot
from catmullrom.geometry import fourth_root as fourth_root
from catmullrom.geometry import guard_spacing as guard_spacing
from catmullrom.geometry import squared_distance as squared_distance

# Input conversion
from catmullrom.points import as_interpolants as as_interpolants
from catmullrom.points import as_points as as_points
from catmullrom.points import into_unit_interval as into_unit_interval
from catmullrom.points import uniform_interpolants as uniform_interpolants

# Segments
from catmullrom.segment import SegmentCurves as SegmentCurves
from catmullrom.segment import catmullrom_cubic as catmullrom_cubic
from catmullrom.segment import centripetal_spacing as centripetal_spacing
from catmullrom.segment import hermite_cubic as hermite_cubic
from catmullrom.segment import interpolate_segment as interpolate_segment
from catmullrom.segment import segment_curves as segment_curves
from catmullrom.segment import segment_polynomials as segment_polynomials

# Settings
from catmullrom.settings import CurveSettings as CurveSettings
from catmullrom.settings import DerivedCurves as DerivedCurves
from catmullrom.settings import EndpointExtension as EndpointExtension
