"""Cloud layer decoder.

RULES:
- Layers keep their source order (lowest first as reported)
- Heights are hundreds of feet in the report, feet in the result
- "///" cover or height (automatic stations) → NOT_REPORTED / None
- Clear-sky codes (SKC, CLR, NSC, NCD) must stand alone
- Layers that fail to decode are reported and skipped
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from metar_parser.config import CLOUD_HEIGHT_UNIT_FT
from metar_parser.core import patterns
from metar_parser.core.context import ParseContext
from metar_parser.core.errors import ErrorSink
from metar_parser.core.report import CloudCover, CloudLayer, ConvectiveCloud
from metar_parser.core.tokens import RawToken


def decode_cloud_token(token: RawToken, errors: ErrorSink) -> Optional[CloudLayer]:
    if patterns.CLEAR_SKY_RE.fullmatch(token.text):
        return CloudLayer(cover=CloudCover(token.text))

    match = patterns.CLOUD_RE.fullmatch(token.text)
    if match is None:
        errors.add("Cloud layer {} is malformed".format(token.describe()))
        return None

    cover = CloudCover(match.group("cover")) if match.group("cover") else CloudCover.NOT_REPORTED
    height = match.group("height")
    convective = match.group("convective")
    return CloudLayer(
        cover=cover,
        height_ft=int(height) * CLOUD_HEIGHT_UNIT_FT if height.isdigit() else None,
        convective=ConvectiveCloud(convective) if convective else None,
    )


def decode_cloud_layers(
    tokens: Sequence[RawToken],
    errors: ErrorSink,
    context: ParseContext,
) -> Optional[Tuple[CloudLayer, ...]]:
    layers: List[CloudLayer] = []
    clear_sky: Optional[RawToken] = None
    for token in tokens:
        layer = decode_cloud_token(token, errors)
        if layer is None:
            continue
        if patterns.CLEAR_SKY_RE.fullmatch(token.text) and clear_sky is None:
            clear_sky = token
        layers.append(layer)

    if clear_sky is not None and len(layers) > 1:
        errors.add("Clear-sky code {} cannot be combined with other cloud layers".format(
            clear_sky.describe(),
        ))
    return tuple(layers) if layers else None
