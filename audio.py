import logging
import os

import pygame

logger = logging.getLogger(__name__)

CUE_FILES = {
    "wall-hit": ("wall.wav", 0.6),
    "paddle-hit": ("paddle.wav", 0.8),
    "score": ("score.wav", 0.9),
    "match-over": ("victory.wav", 0.9),
}


def safe_sound(path):
    if not pygame.mixer.get_init():
        return None
    try:
        if os.path.isfile(path):
            return pygame.mixer.Sound(path)
    except (pygame.error, OSError) as e:
        logger.warning("could not load %s: %s", path, e)
        return None
    logger.debug("no sound asset at %s", path)
    return None


class CuePlayer:
    """Plays a short sound for each game event. Missing assets or mixer mean silence."""

    def __init__(self, audio_dir, muted=False):
        self.muted = muted
        self.sounds = {}
        self.channel = None
        if not pygame.mixer.get_init():
            try:
                pygame.mixer.init()
            except pygame.error as e:
                logger.warning("audio disabled, mixer init failed: %s", e)
                return
        for name, (fname, vol) in CUE_FILES.items():
            snd = safe_sound(os.path.join(audio_dir, fname))
            if snd:
                snd.set_volume(vol)
                self.sounds[name] = snd
        self.channel = pygame.mixer.Channel(1)

    def toggle_mute(self):
        self.muted = not self.muted
        if self.muted and self.channel:
            self.channel.stop()
        return self.muted

    def play(self, events):
        if self.muted or not self.channel:
            return
        for name in events:
            snd = self.sounds.get(name)
            if snd:
                self.channel.stop()
                self.channel.play(snd)
