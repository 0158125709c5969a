"""VoiceStore - per-device voiceprint sample store."""
