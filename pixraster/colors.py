"""RGBA colours and the table of named colours."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Union


@dataclass(frozen=True)
class Color:
    """An immutable RGBA colour with float channels, nominally 0.0 to 1.0."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.r
        yield self.g
        yield self.b
        yield self.a

    def __neg__(self) -> Color:
        return Color(-self.r, -self.g, -self.b, -self.a)

    def __add__(self, other: Color) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        return Color(self.r + other.r, self.g + other.g, self.b + other.b, self.a + other.a)

    def __sub__(self, other: Color) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        return Color(self.r - other.r, self.g - other.g, self.b - other.b, self.a - other.a)

    def __mul__(self, other: Union[Color, float]) -> Color:
        if isinstance(other, Color):
            return Color(self.r * other.r, self.g * other.g, self.b * other.b, self.a * other.a)
        if isinstance(other, (int, float)):
            return Color(self.r * other, self.g * other, self.b * other, self.a * other)
        return NotImplemented

    def __rmul__(self, s: float) -> Color:
        if isinstance(s, (int, float)):
            return Color(self.r * s, self.g * s, self.b * s, self.a * s)
        return NotImplemented

    def __truediv__(self, s: float) -> Color:
        if not isinstance(s, (int, float)):
            return NotImplemented
        return Color(self.r / s, self.g / s, self.b / s, self.a / s)


_OPAQUE_RGB = {
    "AliceBlue": (0.941176534, 0.972549081, 1.000000000),
    "AntiqueWhite": (0.980392218, 0.921568692, 0.843137324),
    "Aqua": (0.000000000, 1.000000000, 1.000000000),
    "Aquamarine": (0.498039246, 1.000000000, 0.831372619),
    "Azure": (0.941176534, 1.000000000, 1.000000000),
    "Beige": (0.960784376, 0.960784376, 0.862745166),
    "Bisque": (1.000000000, 0.894117713, 0.768627524),
    "Black": (0.000000000, 0.000000000, 0.000000000),
    "BlanchedAlmond": (1.000000000, 0.921568692, 0.803921640),
    "Blue": (0.000000000, 0.000000000, 1.000000000),
    "BlueViolet": (0.541176498, 0.168627456, 0.886274576),
    "Brown": (0.647058845, 0.164705887, 0.164705887),
    "BurlyWood": (0.870588303, 0.721568644, 0.529411793),
    "CadetBlue": (0.372549027, 0.619607866, 0.627451003),
    "Chartreuse": (0.498039246, 1.000000000, 0.000000000),
    "Chocolate": (0.823529482, 0.411764741, 0.117647067),
    "Coral": (1.000000000, 0.498039246, 0.313725501),
    "CornflowerBlue": (0.392156899, 0.584313750, 0.929411829),
    "Cornsilk": (1.000000000, 0.972549081, 0.862745166),
    "Crimson": (0.862745166, 0.078431375, 0.235294133),
    "Cyan": (0.000000000, 1.000000000, 1.000000000),
    "DarkBlue": (0.000000000, 0.000000000, 0.545098066),
    "DarkCyan": (0.000000000, 0.545098066, 0.545098066),
    "DarkGoldenrod": (0.721568644, 0.525490224, 0.043137256),
    "DarkGray": (0.662745118, 0.662745118, 0.662745118),
    "DarkGreen": (0.000000000, 0.392156899, 0.000000000),
    "DarkKhaki": (0.741176486, 0.717647076, 0.419607878),
    "DarkMagenta": (0.545098066, 0.000000000, 0.545098066),
    "DarkOliveGreen": (0.333333343, 0.419607878, 0.184313729),
    "DarkOrange": (1.000000000, 0.549019635, 0.000000000),
    "DarkOrchid": (0.600000024, 0.196078449, 0.800000072),
    "DarkRed": (0.545098066, 0.000000000, 0.000000000),
    "DarkSalmon": (0.913725555, 0.588235319, 0.478431404),
    "DarkSeaGreen": (0.560784340, 0.737254918, 0.545098066),
    "DarkSlateBlue": (0.282352954, 0.239215702, 0.545098066),
    "DarkSlateGray": (0.184313729, 0.309803933, 0.309803933),
    "DarkTurquoise": (0.000000000, 0.807843208, 0.819607913),
    "DarkViolet": (0.580392182, 0.000000000, 0.827451050),
    "DeepPink": (1.000000000, 0.078431375, 0.576470613),
    "DeepSkyBlue": (0.000000000, 0.749019623, 1.000000000),
    "DimGray": (0.411764741, 0.411764741, 0.411764741),
    "DodgerBlue": (0.117647067, 0.564705908, 1.000000000),
    "Firebrick": (0.698039234, 0.133333340, 0.133333340),
    "FloralWhite": (1.000000000, 0.980392218, 0.941176534),
    "ForestGreen": (0.133333340, 0.545098066, 0.133333340),
    "Fuchsia": (1.000000000, 0.000000000, 1.000000000),
    "Gainsboro": (0.862745166, 0.862745166, 0.862745166),
    "GhostWhite": (0.972549081, 0.972549081, 1.000000000),
    "Gold": (1.000000000, 0.843137324, 0.000000000),
    "Goldenrod": (0.854902029, 0.647058845, 0.125490203),
    "Gray": (0.501960814, 0.501960814, 0.501960814),
    "Green": (0.000000000, 0.501960814, 0.000000000),
    "GreenYellow": (0.678431392, 1.000000000, 0.184313729),
    "Honeydew": (0.941176534, 1.000000000, 0.941176534),
    "HotPink": (1.000000000, 0.411764741, 0.705882370),
    "IndianRed": (0.803921640, 0.360784322, 0.360784322),
    "Indigo": (0.294117659, 0.000000000, 0.509803951),
    "Ivory": (1.000000000, 1.000000000, 0.941176534),
    "Khaki": (0.941176534, 0.901960850, 0.549019635),
    "Lavender": (0.901960850, 0.901960850, 0.980392218),
    "LavenderBlush": (1.000000000, 0.941176534, 0.960784376),
    "LawnGreen": (0.486274540, 0.988235354, 0.000000000),
    "LemonChiffon": (1.000000000, 0.980392218, 0.803921640),
    "LightBlue": (0.678431392, 0.847058892, 0.901960850),
    "LightCoral": (0.941176534, 0.501960814, 0.501960814),
    "LightCyan": (0.878431439, 1.000000000, 1.000000000),
    "LightGoldenrodYellow": (0.980392218, 0.980392218, 0.823529482),
    "LightGreen": (0.564705908, 0.933333397, 0.564705908),
    "LightGray": (0.827451050, 0.827451050, 0.827451050),
    "LightPink": (1.000000000, 0.713725507, 0.756862819),
    "LightSalmon": (1.000000000, 0.627451003, 0.478431404),
    "LightSeaGreen": (0.125490203, 0.698039234, 0.666666687),
    "LightSkyBlue": (0.529411793, 0.807843208, 0.980392218),
    "LightSlateGray": (0.466666698, 0.533333361, 0.600000024),
    "LightSteelBlue": (0.690196097, 0.768627524, 0.870588303),
    "LightYellow": (1.000000000, 1.000000000, 0.878431439),
    "Lime": (0.000000000, 1.000000000, 0.000000000),
    "LimeGreen": (0.196078449, 0.803921640, 0.196078449),
    "Linen": (0.980392218, 0.941176534, 0.901960850),
    "Magenta": (1.000000000, 0.000000000, 1.000000000),
    "Maroon": (0.501960814, 0.000000000, 0.000000000),
    "MediumAquamarine": (0.400000036, 0.803921640, 0.666666687),
    "MediumBlue": (0.000000000, 0.000000000, 0.803921640),
    "MediumOrchid": (0.729411781, 0.333333343, 0.827451050),
    "MediumPurple": (0.576470613, 0.439215720, 0.858823597),
    "MediumSeaGreen": (0.235294133, 0.701960802, 0.443137288),
    "MediumSlateBlue": (0.482352972, 0.407843173, 0.933333397),
    "MediumSpringGreen": (0.000000000, 0.980392218, 0.603921592),
    "MediumTurquoise": (0.282352954, 0.819607913, 0.800000072),
    "MediumVioletRed": (0.780392230, 0.082352944, 0.521568656),
    "MidnightBlue": (0.098039225, 0.098039225, 0.439215720),
    "MintCream": (0.960784376, 1.000000000, 0.980392218),
    "MistyRose": (1.000000000, 0.894117713, 0.882353008),
    "Moccasin": (1.000000000, 0.894117713, 0.709803939),
    "NavajoWhite": (1.000000000, 0.870588303, 0.678431392),
    "Navy": (0.000000000, 0.000000000, 0.501960814),
    "OldLace": (0.992156923, 0.960784376, 0.901960850),
    "Olive": (0.501960814, 0.501960814, 0.000000000),
    "OliveDrab": (0.419607878, 0.556862772, 0.137254909),
    "Orange": (1.000000000, 0.647058845, 0.000000000),
    "OrangeRed": (1.000000000, 0.270588249, 0.000000000),
    "Orchid": (0.854902029, 0.439215720, 0.839215755),
    "PaleGoldenrod": (0.933333397, 0.909803987, 0.666666687),
    "PaleGreen": (0.596078455, 0.984313786, 0.596078455),
    "PaleTurquoise": (0.686274529, 0.933333397, 0.933333397),
    "PaleVioletRed": (0.858823597, 0.439215720, 0.576470613),
    "PapayaWhip": (1.000000000, 0.937254965, 0.835294187),
    "PeachPuff": (1.000000000, 0.854902029, 0.725490212),
    "Peru": (0.803921640, 0.521568656, 0.247058839),
    "Pink": (1.000000000, 0.752941251, 0.796078503),
    "Plum": (0.866666734, 0.627451003, 0.866666734),
    "PowderBlue": (0.690196097, 0.878431439, 0.901960850),
    "Purple": (0.501960814, 0.000000000, 0.501960814),
    "Red": (1.000000000, 0.000000000, 0.000000000),
    "RosyBrown": (0.737254918, 0.560784340, 0.560784340),
    "RoyalBlue": (0.254901975, 0.411764741, 0.882353008),
    "SaddleBrown": (0.545098066, 0.270588249, 0.074509807),
    "Salmon": (0.980392218, 0.501960814, 0.447058856),
    "SandyBrown": (0.956862807, 0.643137276, 0.376470625),
    "SeaGreen": (0.180392161, 0.545098066, 0.341176480),
    "SeaShell": (1.000000000, 0.960784376, 0.933333397),
    "Sienna": (0.627451003, 0.321568638, 0.176470593),
    "Silver": (0.752941251, 0.752941251, 0.752941251),
    "SkyBlue": (0.529411793, 0.807843208, 0.921568692),
    "SlateBlue": (0.415686309, 0.352941185, 0.803921640),
    "SlateGray": (0.439215720, 0.501960814, 0.564705908),
    "Snow": (1.000000000, 0.980392218, 0.980392218),
    "SpringGreen": (0.000000000, 1.000000000, 0.498039246),
    "SteelBlue": (0.274509817, 0.509803951, 0.705882370),
    "Tan": (0.823529482, 0.705882370, 0.549019635),
    "Teal": (0.000000000, 0.501960814, 0.501960814),
    "Thistle": (0.847058892, 0.749019623, 0.847058892),
    "Tomato": (1.000000000, 0.388235331, 0.278431386),
    "Turquoise": (0.250980407, 0.878431439, 0.815686345),
    "Violet": (0.933333397, 0.509803951, 0.933333397),
    "Wheat": (0.960784376, 0.870588303, 0.701960802),
    "White": (1.000000000, 1.000000000, 1.000000000),
    "WhiteSmoke": (0.960784376, 0.960784376, 0.960784376),
    "Yellow": (1.000000000, 1.000000000, 0.000000000),
    "YellowGreen": (0.603921592, 0.803921640, 0.196078449),
}

NAMED_COLORS: dict[str, Color] = {
    name: Color(r, g, b, 1.0) for name, (r, g, b) in _OPAQUE_RGB.items()
}
NAMED_COLORS["Transparent"] = Color(0.0, 0.0, 0.0, 0.0)

_BY_LOWER_NAME = {name.lower(): color for name, color in NAMED_COLORS.items()}

WHITE = NAMED_COLORS["White"]
BLACK = NAMED_COLORS["Black"]
DARK_GRAY = NAMED_COLORS["DarkGray"]
TRANSPARENT = NAMED_COLORS["Transparent"]


def by_name(name: str) -> Color:
    """Return the named colour; the match ignores case. Unknown names raise KeyError."""
    color = NAMED_COLORS.get(name)
    if color is None:
        color = _BY_LOWER_NAME.get(name.lower())
    if color is None:
        raise KeyError(f"unknown color: {name!r}")
    return color