settings = [
    "first",
    "second",
    {"common": {"nested": True}},
]
