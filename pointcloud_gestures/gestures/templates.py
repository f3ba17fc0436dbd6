"""
Built-in gesture templates.

The classic point-cloud gesture set, one sample gesture per name. Each entry
is a list of strokes in drawing order, each stroke a list of (x, y) samples
in screen coordinates.
"""

DEFAULT_TEMPLATES = {
    "T": [
        [(30, 7), (103, 7)],
        [(66, 7), (66, 87)],
    ],
    "N": [
        [(177, 92), (177, 2)],
        [(182, 1), (246, 95)],
        [(247, 87), (247, 1)],
    ],
    "D": [
        [(345, 9), (345, 87)],
        [(351, 8), (363, 8), (372, 9), (380, 11), (386, 14), (391, 17), (394, 22),
         (397, 28), (399, 34), (400, 42), (400, 50), (400, 56), (399, 61), (397, 66),
         (394, 70), (391, 74), (386, 78), (382, 81), (377, 83), (372, 85), (367, 87),
         (360, 87), (355, 88), (349, 87)],
    ],
    "P": [
        [(507, 8), (507, 87)],
        [(513, 7), (528, 7), (537, 8), (544, 10), (550, 12), (555, 15), (558, 18),
         (560, 22), (561, 27), (562, 33), (561, 37), (559, 42), (556, 45), (550, 48),
         (544, 51), (538, 53), (532, 54), (525, 55), (519, 55), (513, 55), (510, 55)],
    ],
    "X": [
        [(30, 146), (106, 222)],
        [(30, 225), (106, 146)],
    ],
    "H": [
        [(188, 137), (188, 225)],
        [(188, 180), (241, 180)],
        [(241, 137), (241, 225)],
    ],
    "I": [
        [(371, 149), (371, 221)],
        [(341, 149), (401, 149)],
        [(341, 221), (401, 221)],
    ],
    "exclamation": [
        [(526, 142), (526, 204)],
        [(526, 221), (526, 223)],
    ],
    "line": [
        [(12, 347), (119, 347)],
    ],
    "five-point star": [
        [(177, 396), (223, 299), (262, 396), (168, 332), (278, 332), (184, 397)],
    ],
    "null": [
        [(382, 310), (377, 308), (373, 307), (366, 307), (360, 310), (356, 313),
         (353, 316), (349, 321), (347, 326), (344, 331), (342, 337), (341, 343),
         (341, 350), (341, 358), (342, 362), (344, 366), (347, 370), (351, 374),
         (356, 379), (361, 382), (368, 385), (374, 387), (381, 387), (390, 387),
         (397, 385), (404, 382), (408, 378), (412, 373), (416, 367), (418, 361),
         (419, 353), (418, 346), (417, 341), (416, 336), (413, 331), (410, 326),
         (404, 320), (400, 317), (393, 313), (392, 312)],
        [(418, 309), (337, 390)],
    ],
    "arrowhead": [
        [(506, 349), (574, 349)],
        [(525, 306), (584, 349), (525, 388)],
    ],
    "asterisk": [
        [(325, 499), (417, 557)],
        [(417, 499), (325, 557)],
        [(371, 486), (371, 571)],
    ],
    "half-note": [
        [(546, 465), (546, 531)],
        [(540, 530), (536, 529), (533, 528), (529, 529), (524, 530), (520, 532),
         (515, 535), (511, 539), (508, 545), (506, 548), (506, 554), (509, 558),
         (512, 561), (517, 564), (521, 564), (527, 563), (531, 560), (535, 557),
         (538, 553), (542, 548), (544, 544), (546, 540), (546, 536)],
    ],
}
