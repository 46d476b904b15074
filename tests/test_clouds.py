"""Unit tests for the cloud layer decoder."""

from metar_parser.core.report import CloudCover, ConvectiveCloud
from metar_parser.core.tokens import RawToken
from metar_parser.decoders.clouds import decode_cloud_layers


def _tokens(*texts):
    tokens, offset = [], 0
    for text in texts:
        tokens.append(RawToken(text, offset))
        offset += len(text) + 1
    return tokens


class TestCloudLayers:

    def test_layers_keep_source_order(self, errors, context):
        layers = decode_cloud_layers(_tokens("FEW040", "SCT100", "BKN250"), errors, context)
        assert [layer.cover for layer in layers] == [
            CloudCover.FEW,
            CloudCover.SCATTERED,
            CloudCover.BROKEN,
        ]
        assert [layer.height_ft for layer in layers] == [4000, 10000, 25000]
        assert len(errors) == 0

    def test_convective_cloud(self, errors, context):
        (layer,) = decode_cloud_layers(_tokens("BKN030CB"), errors, context)
        assert layer.height_ft == 3000
        assert layer.convective is ConvectiveCloud.CUMULONIMBUS

    def test_towering_cumulus(self, errors, context):
        (layer,) = decode_cloud_layers(_tokens("SCT025TCU"), errors, context)
        assert layer.convective is ConvectiveCloud.TOWERING_CUMULUS

    def test_vertical_visibility(self, errors, context):
        (layer,) = decode_cloud_layers(_tokens("VV002"), errors, context)
        assert layer.cover is CloudCover.VERTICAL_VISIBILITY
        assert layer.height_ft == 200

    def test_clear_sky_code(self, errors, context):
        (layer,) = decode_cloud_layers(_tokens("NSC"), errors, context)
        assert layer.cover is CloudCover.NO_SIGNIFICANT_CLOUD
        assert layer.height_ft is None

    def test_automatic_station_not_reported(self, errors, context):
        (layer,) = decode_cloud_layers(_tokens("//////CB"), errors, context)
        assert layer.cover is CloudCover.NOT_REPORTED
        assert layer.height_ft is None
        assert layer.convective is ConvectiveCloud.CUMULONIMBUS

    def test_height_not_reported(self, errors, context):
        (layer,) = decode_cloud_layers(_tokens("BKN///"), errors, context)
        assert layer.cover is CloudCover.BROKEN
        assert layer.height_ft is None

    def test_malformed_layer_is_skipped(self, errors, context):
        layers = decode_cloud_layers(_tokens("FEW0X0", "BKN100"), errors, context)
        assert [layer.height_ft for layer in layers] == [10000]
        assert "Cloud layer 'FEW0X0' at position 0 is malformed" in errors.freeze()[0]

    def test_clear_sky_mixed_with_layers(self, errors, context):
        layers = decode_cloud_layers(_tokens("NSC", "FEW020"), errors, context)
        assert len(layers) == 2
        assert "cannot be combined" in errors.freeze()[0]

    def test_absent(self, errors, context):
        assert decode_cloud_layers([], errors, context) is None
