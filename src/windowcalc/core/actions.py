"""Action identifiers

Flat catalog of named window placements. The engine treats these as opaque
tags: only equality matters. Values are the camelCase names shared with the
settings file and the host application.
"""

from enum import Enum


class ActionIdentifier(str, Enum):
    """A window positioning action (what the user asked for)."""

    # === Halves ===
    LEFT_HALF = "leftHalf"
    RIGHT_HALF = "rightHalf"
    TOP_HALF = "topHalf"
    BOTTOM_HALF = "bottomHalf"
    CENTER_HALF = "centerHalf"

    # === Corners ===
    TOP_LEFT = "topLeft"
    TOP_RIGHT = "topRight"
    BOTTOM_LEFT = "bottomLeft"
    BOTTOM_RIGHT = "bottomRight"

    # === Thirds ===
    FIRST_THIRD = "firstThird"
    CENTER_THIRD = "centerThird"
    LAST_THIRD = "lastThird"
    FIRST_TWO_THIRDS = "firstTwoThirds"
    CENTER_TWO_THIRDS = "centerTwoThirds"
    LAST_TWO_THIRDS = "lastTwoThirds"

    # === Fourths ===
    FIRST_FOURTH = "firstFourth"
    SECOND_FOURTH = "secondFourth"
    THIRD_FOURTH = "thirdFourth"
    LAST_FOURTH = "lastFourth"
    FIRST_THREE_FOURTHS = "firstThreeFourths"
    CENTER_THREE_FOURTHS = "centerThreeFourths"
    LAST_THREE_FOURTHS = "lastThreeFourths"

    # === Sixths ===
    TOP_LEFT_SIXTH = "topLeftSixth"
    TOP_CENTER_SIXTH = "topCenterSixth"
    TOP_RIGHT_SIXTH = "topRightSixth"
    BOTTOM_LEFT_SIXTH = "bottomLeftSixth"
    BOTTOM_CENTER_SIXTH = "bottomCenterSixth"
    BOTTOM_RIGHT_SIXTH = "bottomRightSixth"

    # === Ninths ===
    TOP_LEFT_NINTH = "topLeftNinth"
    TOP_CENTER_NINTH = "topCenterNinth"
    TOP_RIGHT_NINTH = "topRightNinth"
    MIDDLE_LEFT_NINTH = "middleLeftNinth"
    MIDDLE_CENTER_NINTH = "middleCenterNinth"
    MIDDLE_RIGHT_NINTH = "middleRightNinth"
    BOTTOM_LEFT_NINTH = "bottomLeftNinth"
    BOTTOM_CENTER_NINTH = "bottomCenterNinth"
    BOTTOM_RIGHT_NINTH = "bottomRightNinth"

    # === Corner Thirds ===
    TOP_LEFT_THIRD = "topLeftThird"
    TOP_RIGHT_THIRD = "topRightThird"
    BOTTOM_LEFT_THIRD = "bottomLeftThird"
    BOTTOM_RIGHT_THIRD = "bottomRightThird"

    # === Eighths ===
    TOP_LEFT_EIGHTH = "topLeftEighth"
    TOP_CENTER_LEFT_EIGHTH = "topCenterLeftEighth"
    TOP_CENTER_RIGHT_EIGHTH = "topCenterRightEighth"
    TOP_RIGHT_EIGHTH = "topRightEighth"
    BOTTOM_LEFT_EIGHTH = "bottomLeftEighth"
    BOTTOM_CENTER_LEFT_EIGHTH = "bottomCenterLeftEighth"
    BOTTOM_CENTER_RIGHT_EIGHTH = "bottomCenterRightEighth"
    BOTTOM_RIGHT_EIGHTH = "bottomRightEighth"

    # === Maximize & Center ===
    MAXIMIZE = "maximize"
    ALMOST_MAXIMIZE = "almostMaximize"
    MAXIMIZE_HEIGHT = "maximizeHeight"
    CENTER = "center"
    CENTER_PROMINENTLY = "centerProminently"

    # === Size Changes ===
    LARGER = "larger"
    SMALLER = "smaller"
    LARGER_WIDTH = "largerWidth"
    SMALLER_WIDTH = "smallerWidth"
    LARGER_HEIGHT = "largerHeight"
    SMALLER_HEIGHT = "smallerHeight"

    # === Halve/Double Dimensions ===
    HALVE_HEIGHT_UP = "halveHeightUp"
    HALVE_HEIGHT_DOWN = "halveHeightDown"
    HALVE_WIDTH_LEFT = "halveWidthLeft"
    HALVE_WIDTH_RIGHT = "halveWidthRight"
    DOUBLE_HEIGHT_UP = "doubleHeightUp"
    DOUBLE_HEIGHT_DOWN = "doubleHeightDown"
    DOUBLE_WIDTH_LEFT = "doubleWidthLeft"
    DOUBLE_WIDTH_RIGHT = "doubleWidthRight"

    # === Movement ===
    MOVE_LEFT = "moveLeft"
    MOVE_RIGHT = "moveRight"
    MOVE_UP = "moveUp"
    MOVE_DOWN = "moveDown"

    # === Display Navigation ===
    PREVIOUS_DISPLAY = "previousDisplay"
    NEXT_DISPLAY = "nextDisplay"

    # === Special ===
    RESTORE = "restore"
    SPECIFIED = "specified"
    LEFT_TODO = "leftTodo"
    RIGHT_TODO = "rightTodo"
    TILE_ALL = "tileAll"
    CASCADE_ALL = "cascadeAll"
    CASCADE_ACTIVE_APP = "cascadeActiveApp"
    REVERSE_ALL = "reverseAll"


class SubActionIdentifier(str, Enum):
    """Which concrete variation of an action was applied.

    e.g. FIRST_THIRD yields LEFT_THIRD on a landscape screen and TOP_THIRD on
    a portrait one.
    """

    # === Vertical Thirds (left to right in landscape) ===
    LEFT_THIRD = "leftThird"
    CENTER_VERTICAL_THIRD = "centerVerticalThird"
    RIGHT_THIRD = "rightThird"
    LEFT_TWO_THIRDS = "leftTwoThirds"
    RIGHT_TWO_THIRDS = "rightTwoThirds"

    # === Horizontal Thirds (top to bottom in portrait) ===
    TOP_THIRD = "topThird"
    CENTER_HORIZONTAL_THIRD = "centerHorizontalThird"
    BOTTOM_THIRD = "bottomThird"
    TOP_TWO_THIRDS = "topTwoThirds"
    BOTTOM_TWO_THIRDS = "bottomTwoThirds"

    # === Vertical Fourths ===
    LEFT_FOURTH = "leftFourth"
    CENTER_LEFT_FOURTH = "centerLeftFourth"
    CENTER_RIGHT_FOURTH = "centerRightFourth"
    RIGHT_FOURTH = "rightFourth"

    # === Horizontal Fourths ===
    TOP_FOURTH = "topFourth"
    CENTER_TOP_FOURTH = "centerTopFourth"
    CENTER_BOTTOM_FOURTH = "centerBottomFourth"
    BOTTOM_FOURTH = "bottomFourth"

    # === Three-Fourths ===
    RIGHT_THREE_FOURTHS = "rightThreeFourths"
    BOTTOM_THREE_FOURTHS = "bottomThreeFourths"
    LEFT_THREE_FOURTHS = "leftThreeFourths"
    TOP_THREE_FOURTHS = "topThreeFourths"
    CENTER_VERTICAL_THREE_FOURTHS = "centerVerticalThreeFourths"
    CENTER_HORIZONTAL_THREE_FOURTHS = "centerHorizontalThreeFourths"

    # === Centered Halves ===
    CENTER_VERTICAL_HALF = "centerVerticalHalf"
    CENTER_HORIZONTAL_HALF = "centerHorizontalHalf"

    # === Sixths Landscape ===
    TOP_LEFT_SIXTH_LANDSCAPE = "topLeftSixthLandscape"
    TOP_CENTER_SIXTH_LANDSCAPE = "topCenterSixthLandscape"
    TOP_RIGHT_SIXTH_LANDSCAPE = "topRightSixthLandscape"
    BOTTOM_LEFT_SIXTH_LANDSCAPE = "bottomLeftSixthLandscape"
    BOTTOM_CENTER_SIXTH_LANDSCAPE = "bottomCenterSixthLandscape"
    BOTTOM_RIGHT_SIXTH_LANDSCAPE = "bottomRightSixthLandscape"

    # === Sixths Portrait ===
    TOP_LEFT_SIXTH_PORTRAIT = "topLeftSixthPortrait"
    TOP_RIGHT_SIXTH_PORTRAIT = "topRightSixthPortrait"
    LEFT_CENTER_SIXTH_PORTRAIT = "leftCenterSixthPortrait"
    RIGHT_CENTER_SIXTH_PORTRAIT = "rightCenterSixthPortrait"
    BOTTOM_LEFT_SIXTH_PORTRAIT = "bottomLeftSixthPortrait"
    BOTTOM_RIGHT_SIXTH_PORTRAIT = "bottomRightSixthPortrait"

    # === Two-Sixths ===
    TOP_LEFT_TWO_SIXTHS_LANDSCAPE = "topLeftTwoSixthsLandscape"
    TOP_LEFT_TWO_SIXTHS_PORTRAIT = "topLeftTwoSixthsPortrait"
    TOP_RIGHT_TWO_SIXTHS_LANDSCAPE = "topRightTwoSixthsLandscape"
    TOP_RIGHT_TWO_SIXTHS_PORTRAIT = "topRightTwoSixthsPortrait"
    BOTTOM_LEFT_TWO_SIXTHS_LANDSCAPE = "bottomLeftTwoSixthsLandscape"
    BOTTOM_LEFT_TWO_SIXTHS_PORTRAIT = "bottomLeftTwoSixthsPortrait"
    BOTTOM_RIGHT_TWO_SIXTHS_LANDSCAPE = "bottomRightTwoSixthsLandscape"
    BOTTOM_RIGHT_TWO_SIXTHS_PORTRAIT = "bottomRightTwoSixthsPortrait"

    # === Ninths ===
    TOP_LEFT_NINTH = "topLeftNinth"
    TOP_CENTER_NINTH = "topCenterNinth"
    TOP_RIGHT_NINTH = "topRightNinth"
    MIDDLE_LEFT_NINTH = "middleLeftNinth"
    MIDDLE_CENTER_NINTH = "middleCenterNinth"
    MIDDLE_RIGHT_NINTH = "middleRightNinth"
    BOTTOM_LEFT_NINTH = "bottomLeftNinth"
    BOTTOM_CENTER_NINTH = "bottomCenterNinth"
    BOTTOM_RIGHT_NINTH = "bottomRightNinth"

    # === Corner Thirds ===
    TOP_LEFT_THIRD = "topLeftThird"
    TOP_RIGHT_THIRD = "topRightThird"
    BOTTOM_LEFT_THIRD = "bottomLeftThird"
    BOTTOM_RIGHT_THIRD = "bottomRightThird"

    # === Eighths ===
    TOP_LEFT_EIGHTH = "topLeftEighth"
    TOP_CENTER_LEFT_EIGHTH = "topCenterLeftEighth"
    TOP_CENTER_RIGHT_EIGHTH = "topCenterRightEighth"
    TOP_RIGHT_EIGHTH = "topRightEighth"
    BOTTOM_LEFT_EIGHTH = "bottomLeftEighth"
    BOTTOM_CENTER_LEFT_EIGHTH = "bottomCenterLeftEighth"
    BOTTOM_CENTER_RIGHT_EIGHTH = "bottomCenterRightEighth"
    BOTTOM_RIGHT_EIGHTH = "bottomRightEighth"

    # === Special ===
    MAXIMIZE = "maximize"
    LEFT_TODO = "leftTodo"
    RIGHT_TODO = "rightTodo"
