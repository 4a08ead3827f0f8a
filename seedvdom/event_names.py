"""DOM event names that listeners can be attached to."""

from __future__ import annotations

import logging
from enum import Enum

logger = logging.getLogger(__name__)


class Ev(Enum):
    """A DOM event name."""

    CACHED = "cached"
    ERROR = "error"
    ABORT = "abort"
    LOAD = "load"
    BEFORE_UNLOAD = "beforeunload"
    UNLOAD = "unload"
    ONLINE = "online"
    OFFLINE = "offline"
    FOCUS = "focus"
    BLUR = "blur"
    OPEN = "open"
    MESSAGE = "message"
    CLOSE = "close"
    PAGE_HIDE = "pagehide"
    PAGE_SHOW = "pageshow"
    POP_STATE = "popstate"
    ANIMATION_START = "animationstart"
    ANIMATION_END = "animationend"
    ANIMATION_ITERATION = "animationiteration"
    TRANSITION_START = "transtionstart"
    TRANSITION_END = "transitionend"
    TRANSITION_RUN = "transitionrun"

    REST = "rest"
    SUBMIT = "submit"
    BEFORE_PRINT = "beforeprint"
    AFTER_PRINT = "afterprint"
    COMPOSITION_START = "compositionstart"
    COMPOSITION_UPDATE = "compositionupdate"
    COMPOSITION_END = "compositionend"

    FULL_SCREEN_CHANGE = "fullscreenchange"
    FULL_SCREEN_ERROR = "fullscreenerror"
    RESIZE = "resize"
    SCROLL = "scroll"
    CUT = "cut"
    COPY = "copy"
    PASTE = "paste"

    KEY_DOWN = "keydown"
    KEY_UP = "keyup"
    KEY_PRESS = "keypress"
    AUX_CLICK = "auxclick"
    CLICK = "click"
    CONTEXT_MENU = "contextmenu"
    DBL_CLICK = "dblclick"
    MOUSE_DOWN = "mousedown"
    MOUSE_ENTER = "mouseenter"
    MOUSE_LEAVE = "mouseleave"
    MOUSE_MOVE = "mousemove"
    MOUSE_OVER = "mouseover"
    MOUSE_OUT = "mouseout"
    MOUSE_UP = "mouseup"
    POINTER_LOCK_CHANGE = "pointerlockchange"
    POINTER_LOCK_ERROR = "pointerlockerror"
    SELECT = "select"
    WHEEL = "wheel"

    POINTER_OVER = "pointerover"
    POINTER_ENTER = "pointerenter"
    POINTER_DOWN = "pointerdown"
    POINTER_MOVE = "pointermove"
    POINTER_UP = "pointerup"
    POINTER_CANCEL = "pointercancel"
    POINTER_OUT = "pointerout"
    POINTER_LEAVE = "pointerleave"
    GOT_POINTER_CAPTURE = "gotpointercapture"
    LOST_POINTER_CAPTURE = "lostpointercapture"

    DRAG = "drag"
    DRAG_END = "dragend"
    DRAG_ENTER = "dragenter"
    DRAG_START = "dragstart"
    DRAG_LEAVE = "dragleave"
    DRAG_OVER = "dragover"
    DROP = "drop"

    AUDIO_PROCESS = "audioprocess"
    CAN_PLAY = "canplay"
    CAN_PLAY_THROUGH = "canplaythrough"
    COMPLETE = "complete"
    DURATION_CHANGE = "durationchange"
    EMPTIED = "emptied"
    ENDED = "ended"
    LOADED_DATA = "loadeddata"
    LOADED_META_DATA = "loadedmetadata"
    PAUSE = "pause"
    PLAY = "play"
    PLAYING = "playing"
    RATE_CHANGE = "ratechange"
    SEEKED = "seeked"
    SEEKING = "seeking"
    STALLED = "stalled"
    SUSPEND = "suspend"
    TIME_UPDATE = "timeupdate"
    VOLUME_CHANGE = "volumechange"

    CHANGE = "change"
    INPUT = "input"

    # Deprecated.
    TRIGGER_UPDATE = "triggerupdate"

    def as_str(self) -> str:
        """Return the DOM event name."""
        return self.value

    @classmethod
    def from_str(cls, name: str) -> Ev:
        """Return the event with this name; unknown names log an error and give CLICK."""
        try:
            return cls(name)
        except ValueError:
            logger.error("Can't find this event: %s", name)
            return cls.CLICK

    def __str__(self) -> str:
        return self.value