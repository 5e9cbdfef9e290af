from simon.utilities.env.board import BoardConfiguration
from simon.utilities.env.playback import PlaybackConfiguration
from simon.utilities.env.runtime import RuntimeConfiguration


class Configuration(
    PlaybackConfiguration,
    BoardConfiguration,
    RuntimeConfiguration,
):
    """Aggregate environment configuration helpers."""
