"""도메인 상수."""

READ_IMAGE_COMMAND = "/readimage"
HELP_COMMAND = "/help"
SONG_LINKS_COMMAND = "/songlinks"

HELP_TEXT = (
    "Type /songlinks, followed by up to 10 lines of song titles to get download links.\n"
    "/readimage with an attached image, to get the text from the image.\n"
    "/donate to get a QR code."
)

SONG_LINKS_MAX_LINES = 10
SONG_LINKS_MAX_CHARS = 50

# default exchange 라우팅 (routing_key = 큐 이름)
IMAGE_QUEUE = "ImageToText"
REPLY_QUEUE = "Reply"
MUSIC_QUEUE = "Music"
