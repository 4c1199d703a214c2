import pytest

from pnmkit.raster import UINT8, UINT16, ImageKind, PixelColor, PnmFormat, RasterBuffer


@pytest.mark.parametrize("fmt", list(PnmFormat))
def test_swap_encoding_twice_is_identity(fmt):
    buffer = RasterBuffer(4, 4, fmt)
    buffer.swap_encoding()
    assert buffer.format is not fmt
    assert buffer.format.kind is fmt.kind
    assert buffer.format.is_binary != fmt.is_binary
    buffer.swap_encoding()
    assert buffer.format is fmt


def test_magic_numbers_follow_kind_then_encoding():
    expected = {
        PnmFormat.PBM_ASCII: "P1",
        PnmFormat.PGM_ASCII: "P2",
        PnmFormat.PPM_ASCII: "P3",
        PnmFormat.PBM_BINARY: "P4",
        PnmFormat.PGM_BINARY: "P5",
        PnmFormat.PPM_BINARY: "P6",
    }
    for fmt, magic in expected.items():
        assert fmt.magic_number == magic


def test_channel_count():
    assert PnmFormat.PPM_ASCII.channel_count == 3
    assert PnmFormat.PPM_BINARY.channel_count == 3
    assert PnmFormat.PGM_BINARY.channel_count == 1
    assert PnmFormat.PBM_ASCII.channel_count == 1


@pytest.mark.parametrize(
    "name,fmt",
    [
        ("pbm", PnmFormat.PBM_BINARY),
        ("PGM", PnmFormat.PGM_BINARY),
        ("ppm-ascii", PnmFormat.PPM_ASCII),
        ("P4", PnmFormat.PBM_BINARY),
        ("p2", PnmFormat.PGM_ASCII),
    ],
)
def test_parse_format_names(name, fmt):
    assert PnmFormat.parse(name) is fmt


def test_parse_unknown_format():
    with pytest.raises(ValueError):
        PnmFormat.parse("png")


def test_of_and_extension():
    assert PnmFormat.of(ImageKind.COLOR, binary=False) is PnmFormat.PPM_ASCII
    assert PnmFormat.PGM_ASCII.extension == ".pgm"


def test_channel_type_maximum():
    assert UINT8.maximum == 255
    assert UINT8.byte_width == 1
    assert UINT16.maximum == 65535
    assert UINT16.byte_width == 2


def test_pixel_color_single_value_fills_alias():
    color = PixelColor(7)
    assert color.r == 7
    assert color.y == 7
    assert PixelColor.rgb(1, 2, 3).b == 3
    assert PixelColor(y=4).r == 0
