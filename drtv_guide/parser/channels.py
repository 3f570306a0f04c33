"""
Channel registry for drtv_guide
"""

from typing import Any, List, Optional

from ..utils import clean_text


class ChannelRegistry:
    """Resolves DR channel identifiers to display names"""

    # Fallback names, used when the API omits or blanks channelName
    KNOWN_CHANNELS = {
        "20875": "DR1",
        "20876": "DR2",
        "20892": "DR3",
        "20966": "DR Ramasjang",
        "21546": "DR Ultra",
        "22221": "DR K",
        "22463": "DR Nyheder",
        "192099": "DR Ramaskrig",
        "237449": "DR1 HD",
    }

    @classmethod
    def resolve(cls, channel_id: Any, api_name: Optional[Any] = None) -> str:
        """
        Return the best available name for a channel

        Priority: API-provided name, then the static table, then a name
        synthesized from the raw identifier.

        Args:
            channel_id: channelId from the API (string or integer)
            api_name: channelName from the API, if any

        Returns:
            str: Non-empty display name
        """
        if isinstance(api_name, str) and api_name.strip():
            return clean_text(api_name.strip())

        raw_id = "" if channel_id is None else str(channel_id)
        return cls.KNOWN_CHANNELS.get(raw_id, clean_text(f"Channel-{raw_id}"))

    @classmethod
    def channel_ids(cls) -> List[str]:
        """Known channel IDs in request order"""
        return list(cls.KNOWN_CHANNELS)
