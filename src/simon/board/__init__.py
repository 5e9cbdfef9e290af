from simon.board.countdown import CountdownPresentation  # noqa: F401
from simon.board.countdown import CountdownSeverity  # noqa: F401
from simon.board.countdown import CountdownThresholds  # noqa: F401
from simon.board.countdown import TimerColor  # noqa: F401
from simon.board.countdown import present_countdown  # noqa: F401
from simon.board.layout import BoardGeometry  # noqa: F401
from simon.board.layout import RegionSpan  # noqa: F401
from simon.board.layout import WedgeOutline  # noqa: F401
from simon.board.layout import compute_spans  # noqa: F401
from simon.board.layout import wedge_outline  # noqa: F401
from simon.board.layout import wedge_path  # noqa: F401
from simon.board.regions import CLASSIC_QUADRANTS  # noqa: F401
