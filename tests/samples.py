#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Synthetic LHE text samples shared by the test modules
"""

from __future__ import annotations

from pylhef.models.records import FourMomentum, ParticleRecord

INIT_TEXT = """\
<init>
1 10 3. 4. 5 6 7 8 9 2
11. 12. 13. 14
15. 16. 17. 18
</init>"""

EVENT_TEXT = """\
<event>
2 1 3. 4. 5. 6.
7 8 9 10 11 12 13. 14. 15. 16. 17. 18. 19.
20 21 22 23 24 25 26. 27. 28. 29. 30. 31. 32.
</event>"""

PLAIN_DOCUMENT_TEXT = """\
<LesHouchesEvents version="1.0">
<init>
52 61 54. 55. 56 57 58 59 60 2
62. 63. 64. 65
66. 67. 68. 69
</init>
<event>
2 1 3. 4. 5. 6.
7 8 9 10 11 12 13. 14. 15. 16. 17. 18. 19.
20 21 22 23 24 25 26. 27. 28. 29. 30. 31. 32.
</event>
<event>
1 33 35. 36. 37. 38.
39 40 41 42 43 44 45. 46. 47. 48. 49. 50. 51.
</event>
</LesHouchesEvents>"""

STRING_DOCUMENT_TEXT = """\
<LesHouchesEvents version="1.0">
<!--
File generated with HELAC-DIPOLES
-->
<header>
header line 1
<line> header line 2</line>
</header>
<init>
2212 2212 6500. 6500. 0 0 260000 260000 3 1
1.5E+02 2.5E-01 1.0E+00 1
# extra line 1
extra line 2
</init>
<event>
1 1 1. 91.188 7.8E-03 1.18E-01
21 -1 0 0 501 502 0. 0. 45.6 45.6 0. 0. 9.
# extra event line
</event>
</LesHouchesEvents>
"""

HELAC_RS_DOCUMENT_TEXT = """\
<LesHouchesEvents version="1.0">
<!--
File generated with HELAC-DIPOLES
-->
<init>
2212 2212 4000. 4000. 0 0 21100 21100 3 1
2.5E+01 1.0E-01 1.0E+00 1
# SUMPDF 4 1 2 3 4 -1 -2 0 8
# DIPMAP 1   9  1  7  1  8  1  9  2  7  2  8  2  9  7  8  7  9  8  9
# JETALGO 1 2 3. 4. F 5.
</init>
<event>
1 1 1. 91.188 7.8E-03 1.18E-01
21 -1 0 0 501 502 0. 0. 45.6 45.6 0. 0. 9.
# pdf 1.0 2.0 3.0
# me 13. 1 6 3. 4. 5 2 7 8 9. 10. 11. 12.
# jet 1 2 3
</event>
<event>
1 1 -.5E+00 91.188 7.8E-03 1.18E-01
21 -1 0 0 501 502 0. 0. 45.6 45.6 0. 0. 9.
# jet 1 2 3
# me 13. 1 6 3. 4. 0 2 7 8 9. 10.
# pdf 1.0 2.0 3.0
</event>
</LesHouchesEvents>
"""

SUMPDF_LINE = "# SUMPDF 4 1 2 3 4 -1 -2 0 8\n"
DIPMAP_LINE = (
    "# DIPMAP 1   9  1  7  1  8  1  9  2  7  2  8  2  9  7  8  7  9  8  9\n"
)
JETALGO_LINE = "# JETALGO 1 2 3. 4. F 5.\n"



def make_particle(pdg_id: int = 21, status: int = 1) -> ParticleRecord:
    return ParticleRecord(
        pdg_id=pdg_id,
        status=status,
        mother_1_id=1,
        mother_2_id=2,
        color_1=501,
        color_2=0,
        momentum=FourMomentum(1.5, -2.25, 30.0, 30.12),
        mass=0.0,
        proper_lifetime=0.0,
        spin=9.0,
    )
