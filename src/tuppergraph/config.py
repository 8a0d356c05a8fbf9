"""
Configuration & Constants
=========================
This module serves as the central registry for global constants.

Why is this file needed?
------------------------
1. Abstraction: The grid geometry (106 x 17 pixels, 1802 bits) is used by the
   decoder, the view and the tests. It lives here instead of being repeated
   as magic numbers.
2. Presets: The documented values of 'k' are long digit strings; keeping them
   in one place keeps the rest of the code readable.

Exports:
    GRID_COLUMNS (int): Width of one plot in pixels.
    GRID_ROWS (int): Height of one plot in pixels.
    BIT_LENGTH (int): Number of bits encoded by one plot.
    SELF_REFERENTIAL_K (str): The 'k' at which the formula plots itself.
    NAME_K (str): The 'k' at which the formula plots the author's name.
    PRESETS (dict[str, str]): Display name -> 'k' for the Presets menu.
"""
from __future__ import annotations

# Grid geometry
GRID_COLUMNS: int = 106
GRID_ROWS: int = 17
BIT_LENGTH: int = GRID_COLUMNS * GRID_ROWS  # 1802

# Tupper's constant: the formula plots its own written form at this height.
SELF_REFERENTIAL_K: str = (
    "960939379918958884971672962127852754715004339660129306651505519271702802"
    "3952664246896428421743507181212671537827706233559932372808741443078913259639413377"
    "2348785773574982392662971551717371699516523289053822161240323885586618401323558513"
    "6048828693337902491454229288667081096184496091705183454067827731551705405381627380"
    "9676025656250169814820834187831638491155902256100036523513703438744618483787372381"
    "9822484986346503315941005497470059313833922649724946175154572836670236974546101465"
    "5997933798537483143786841806593422227898388722980000748404719"
)

# Plots the name "Aaron Anderson".
NAME_K: str = (
    "9572393478691603843040696944304220558947757607414092789689772220117830826841543166"
    "5535209576508084736204612754954116961002254402409340259476323624137461373882923726"
    "4735576425373679971533973032124268228068867407562015911363723525520990362674427455"
    "6006047285295032025837097171554390542172802380457775308894172711105716151439652229"
    "9287116742601294311641116234329109236424988481630056351075709161772426019678867419"
    "4958705021119177797059126793670648206069579380440109899749426051546876490046286687"
    "535922657289945743360"
)

PRESETS: dict[str, str] = {
    "Tupper's formula": SELF_REFERENTIAL_K,
    "Name": NAME_K,
}

# Renderer
CELL_SIZE: float = 10.0
FILLED_COLOR: str = "#808080"
EMPTY_COLOR: str = "#FFFFFF"
BORDER_COLOR: str = "#000000"

# Application identity (QCoreApplication / QSettings)
ORG_ID = "tuppergraph"
APP_ID = "tuppergraph"
VISIBLE_APP_NAME = "TupperGraph"
