from simon.renderers.simon_board.provider import \
    PlaybackCoordinator  # noqa: F401
from simon.renderers.simon_board.renderer import Control  # noqa: F401
from simon.renderers.simon_board.renderer import \
    SimonBoardRenderer  # noqa: F401
from simon.renderers.simon_board.state import BoardInputs  # noqa: F401
from simon.renderers.simon_board.state import RoundResult  # noqa: F401
from simon.renderers.simon_board.state import SimonBoardState  # noqa: F401
