# (h, s, v) -> (r, g, b), hue in turns
samples_hsv_rgb = {
    (0.0, 1.0, 1.0): (1.0, 0.0, 0.0),
    (1 / 6, 1.0, 1.0): (1.0, 1.0, 0.0),
    (1 / 3, 1.0, 1.0): (0.0, 1.0, 0.0),
    (0.5, 1.0, 1.0): (0.0, 1.0, 1.0),
    (2 / 3, 1.0, 1.0): (0.0, 0.0, 1.0),
    (5 / 6, 1.0, 1.0): (1.0, 0.0, 1.0),
    (0.25, 0.5, 0.8): (0.6, 0.8, 0.4),
    (0.9, 1.0, 1.0): (1.0, 0.0, 0.6),
    (0.0, 0.0, 0.5): (0.5, 0.5, 0.5),
}

# HTML string -> (r, g, b, a)
samples_html = {
    "#0F0": (0.0, 1.0, 0.0, 1.0),
    "#0000ff": (0.0, 0.0, 1.0, 1.0),
    "663399cc": (0.4, 0.2, 0.6, 0.8),
    "#f80c": (1.0, 8 / 15, 0.0, 12 / 15),
    "888": (8 / 15, 8 / 15, 8 / 15, 1.0),
    "FFFFFF80": (1.0, 1.0, 1.0, 128 / 255),
}

valid_html = ["#55aaFF", "#55AAFF20", "55AAFF", "#F2C", "abcd", "#0123abCD"]

invalid_html = [
    "",
    "#",
    "#AABBC",
    "#55aaFF5",
    "12345",
    "#GGG",
    "xyz",
    "#12 456",
    "##fff",
    "0x12ab",
    "#ffffff0000",
]

# 8-bit (r, g, b, a) tuples
samples_rgba8 = [
    (0, 0, 0, 0),
    (255, 255, 255, 255),
    (255, 0, 0, 255),
    (1, 2, 3, 4),
    (128, 64, 32, 16),
    (17, 170, 205, 254),
    (51, 102, 153, 204),
]
