"""Run the VoiceStore server."""

from voicestore.app import run_server

if __name__ == "__main__":
    run_server()
