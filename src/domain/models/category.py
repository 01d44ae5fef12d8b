"""Per-platform contest categories.

Each platform has its own closed set of categories. Every set ends in an
explicit ``OTHER`` member that classifiers fall back to.
"""

from enum import Enum


class AtcoderCategory(str, Enum):
    ABC = "ABC"
    ARC = "ARC"
    AGC = "AGC"
    AHC = "AHC"
    PAST = "PAST"
    JOI = "JOI"
    JAG = "JAG"
    ABC_LIKE = "ABC-Like"
    ARC_LIKE = "ARC-Like"
    AGC_LIKE = "AGC-Like"
    MARATHON = "Marathon"
    OTHER_SPONSORED = "Other Sponsored"
    OTHER = "Other"


class CodeforcesCategory(str, Enum):
    DIV1 = "Div. 1"
    DIV2 = "Div. 2"
    DIV3 = "Div. 3"
    DIV4 = "Div. 4"
    DIV1_AND_DIV2 = "Div. 1 + Div. 2"
    EDUCATIONAL = "Educational"
    GLOBAL = "Global"
    KOTLIN = "Kotlin"
    ICPC = "ICPC"
    QSHARP = "Q#"
    OTHER = "Other"


class YukicoderCategory(str, Enum):
    NORMAL = "Normal"
    OTHER = "Other"


class YosupoCategory(str, Enum):
    SAMPLE = "Sample"
    DATA_STRUCTURE = "Data Structure"
    GRAPH = "Graph"
    TREE = "Tree"
    MATH = "Math"
    CONVOLUTION = "Convolution"
    POLYNOMIAL = "Polynomial"
    MATRIX = "Matrix"
    STRING = "String"
    GEOMETRY = "Geometry"
    OTHER = "Other"


class AojCategory(str, Enum):
    VOLUME = "Volume"
    ICPC = "ICPC"
    JAG = "JAG"
    JOI = "JOI"
    PCK = "PCK"
    UOA = "UOA"
    OTHER = "Other"


ContestCategory = (
    AtcoderCategory | CodeforcesCategory | YukicoderCategory | YosupoCategory | AojCategory
)
