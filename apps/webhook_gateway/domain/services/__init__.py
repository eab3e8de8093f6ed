from apps.webhook_gateway.domain.services.song_list import parse_song_list

__all__ = ["parse_song_list"]
