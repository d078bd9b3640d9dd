"""Downloadable example file showing every column the importer understands."""

TEMPLATE_FILENAME = "reelboard-import-template.csv"

TEMPLATE_HEADER = (
    "title,status,dueDate,views,likes,comments,shares,category,"
    "tiktokUrl,instagramUrl,hashtags,summary"
)

TEMPLATE_EXAMPLE_ROW = (
    '"Spring garden tour",posted,2026-03-01,12000,850,42,10,garden,'
    "https://www.tiktok.com/@me/video/7340000000000000000,"
    "https://www.instagram.com/reel/C4abcdEFGhi/,"
    '"#garden #spring #plants","Walkthrough of the raised beds after planting"'
)

TEMPLATE_CSV = f"{TEMPLATE_HEADER}\n{TEMPLATE_EXAMPLE_ROW}\n"
