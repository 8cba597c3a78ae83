"""Reference vectors shared by the test suite."""

# Published XYZ -> Oklab pairs (3 decimals)
samples_xyz_oklab = {
    (0.950, 1.000, 1.089): (1.000, 0.000, 0.000),
    (1.000, 0.000, 0.000): (0.450, 1.236, -0.019),
    (0.000, 1.000, 0.000): (0.922, -0.671, 0.263),
    (0.000, 0.000, 1.000): (0.153, -1.415, -0.449),
}

samples_linear_rgb_oklab = {
    (0.4, 0.2, 0.6): (0.66066486, 0.079970956, -0.095915854),
    (1.0, 0.0, 0.0): (0.627955, 0.224863, 0.125846),
    (0.0, 1.0, 0.0): (0.866440, -0.233888, 0.179498),
    (0.0, 0.0, 1.0): (0.452014, -0.032457, -0.311528),
    (1.0, 1.0, 1.0): (1.0, 0.0, 0.0),
    (0.0, 0.0, 0.0): (0.0, 0.0, 0.0),
}

# sRGB primaries in Oklch (l, c, hue degrees)
samples_srgb_oklch = {
    (1.0, 0.0, 0.0): (0.62796, 0.25768, 29.2339),
    (0.0, 1.0, 0.0): (0.86644, 0.29483, 142.4953),
    (0.0, 0.0, 1.0): (0.45201, 0.31321, 264.0520),
}

# encoded sRGB channel -> linear channel
samples_srgb_linear = {
    0.0: 0.0,
    0.04045: 0.0031308,
    0.5: 0.21404114,
    0.75: 0.52252155,
    1.0: 1.0,
}

samples_hex_srgb = {
    "#000000": (0.0, 0.0, 0.0),
    "#ffffff": (1.0, 1.0, 1.0),
    "#3366cc": (0.2, 0.4, 0.8),
    "#ff0033": (1.0, 0.0, 0.2),
}

sample_xyz = [
    (0.0, 0.0, 0.0),
    (0.2, 0.3, 0.4),
    (0.5, 0.5, 0.5),
    (0.95047, 1.0, 1.08883),
]

sample_linear_rgb = [
    (0.0, 0.0, 0.0),
    (0.4, 0.2, 0.6),
    (1.0, 0.0, 0.0),
    (0.25, 0.75, 0.25),
    (1.0, 1.0, 1.0),
]

sample_oklab = [
    (0.0, 0.0, 0.0),
    (0.5, 0.1, -0.1),
    (0.8, -0.05, 0.1),
    (1.0, 0.0, 0.0),
]

sample_srgb = [
    (0.0, 0.0, 0.0),
    (0.25, 0.75, 0.25),
    (0.1, 0.5, 0.9),
    (0.333, 0.666, 0.999),
    (1.0, 1.0, 1.0),
]
