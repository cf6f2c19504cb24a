APP_ORG = "WarnoModMaker"
APP_NAME = "JSON Profile Editor"

BASE_TITLE = "JSON Profile Editor"
JSON_SUFFIX = ".json"
JSON_FILTER = "JSON Profile Files (*.json)"

SETTINGS_GEOMETRY = "profile_editor/geometry"
SETTINGS_LAST_DIR = "profile_editor/last_directory"
SETTINGS_RECENTS = "profile_editor/recent"
MAX_RECENTS = 8

DEFAULT_TAB_WIDTH = 2
DEFAULT_FONT_SIZE = 12
