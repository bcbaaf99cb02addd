"""Keyboard key codes, laid out as the windowing layer reports them."""

from __future__ import annotations

import enum

SCANCODE_MASK = 1 << 30


def scancode_to_keycode(scancode: int) -> int:
    """Return the key code of a key that has no printable character."""
    return scancode | SCANCODE_MASK


class KeyCode(enum.IntEnum):
    """Key codes: printable keys use their character, others their scancode."""

    UNKNOWN = 0

    RETURN = ord("\r")
    ESCAPE = 0x1B
    BACKSPACE = ord("\b")
    TAB = ord("\t")
    SPACE = ord(" ")
    EXCLAIM = ord("!")
    QUOTEDBL = ord('"')
    HASH = ord("#")
    PERCENT = ord("%")
    DOLLAR = ord("$")
    AMPERSAND = ord("&")
    QUOTE = ord("'")
    LEFTPAREN = ord("(")
    RIGHTPAREN = ord(")")
    ASTERISK = ord("*")
    PLUS = ord("+")
    COMMA = ord(",")
    MINUS = ord("-")
    PERIOD = ord(".")
    SLASH = ord("/")
    KEY_0 = ord("0")
    KEY_1 = ord("1")
    KEY_2 = ord("2")
    KEY_3 = ord("3")
    KEY_4 = ord("4")
    KEY_5 = ord("5")
    KEY_6 = ord("6")
    KEY_7 = ord("7")
    KEY_8 = ord("8")
    KEY_9 = ord("9")
    COLON = ord(":")
    SEMICOLON = ord(";")
    LESS = ord("<")
    EQUALS = ord("=")
    GREATER = ord(">")
    QUESTION = ord("?")
    AT = ord("@")

    LEFTBRACKET = ord("[")
    BACKSLASH = ord("\\")
    RIGHTBRACKET = ord("]")
    CARET = ord("^")
    UNDERSCORE = ord("_")
    BACKQUOTE = ord("`")
    A = ord("a")
    B = ord("b")
    C = ord("c")
    D = ord("d")
    E = ord("e")
    F = ord("f")
    G = ord("g")
    H = ord("h")
    I = ord("i")  # noqa: E741
    J = ord("j")
    K = ord("k")
    L = ord("l")
    M = ord("m")
    N = ord("n")
    O = ord("o")  # noqa: E741
    P = ord("p")
    Q = ord("q")
    R = ord("r")
    S = ord("s")
    T = ord("t")
    U = ord("u")
    V = ord("v")
    W = ord("w")
    X = ord("x")
    Y = ord("y")
    Z = ord("z")

    CAPSLOCK = scancode_to_keycode(57)

    F1 = scancode_to_keycode(58)
    F2 = scancode_to_keycode(59)
    F3 = scancode_to_keycode(60)
    F4 = scancode_to_keycode(61)
    F5 = scancode_to_keycode(62)
    F6 = scancode_to_keycode(63)
    F7 = scancode_to_keycode(64)
    F8 = scancode_to_keycode(65)
    F9 = scancode_to_keycode(66)
    F10 = scancode_to_keycode(67)
    F11 = scancode_to_keycode(68)
    F12 = scancode_to_keycode(69)

    PRINTSCREEN = scancode_to_keycode(70)
    SCROLLLOCK = scancode_to_keycode(71)
    PAUSE = scancode_to_keycode(72)
    INSERT = scancode_to_keycode(73)
    HOME = scancode_to_keycode(74)
    PAGEUP = scancode_to_keycode(75)
    KEY_DELETE = 0x7F
    END = scancode_to_keycode(77)
    PAGEDOWN = scancode_to_keycode(78)
    RIGHT = scancode_to_keycode(79)
    LEFT = scancode_to_keycode(80)
    DOWN = scancode_to_keycode(81)
    UP = scancode_to_keycode(82)

    NUMLOCKCLEAR = scancode_to_keycode(83)
    KP_DIVIDE = scancode_to_keycode(84)
    KP_MULTIPLY = scancode_to_keycode(85)
    KP_MINUS = scancode_to_keycode(86)
    KP_PLUS = scancode_to_keycode(87)
    KP_ENTER = scancode_to_keycode(88)
    KP_1 = scancode_to_keycode(89)
    KP_2 = scancode_to_keycode(90)
    KP_3 = scancode_to_keycode(91)
    KP_4 = scancode_to_keycode(92)
    KP_5 = scancode_to_keycode(93)
    KP_6 = scancode_to_keycode(94)
    KP_7 = scancode_to_keycode(95)
    KP_8 = scancode_to_keycode(96)
    KP_9 = scancode_to_keycode(97)
    KP_0 = scancode_to_keycode(98)
    KP_PERIOD = scancode_to_keycode(99)

    APPLICATION = scancode_to_keycode(101)
    POWER = scancode_to_keycode(102)
    KP_EQUALS = scancode_to_keycode(103)
    F13 = scancode_to_keycode(104)
    F14 = scancode_to_keycode(105)
    F15 = scancode_to_keycode(106)
    F16 = scancode_to_keycode(107)
    F17 = scancode_to_keycode(108)
    F18 = scancode_to_keycode(109)
    F19 = scancode_to_keycode(110)
    F20 = scancode_to_keycode(111)
    F21 = scancode_to_keycode(112)
    F22 = scancode_to_keycode(113)
    F23 = scancode_to_keycode(114)
    F24 = scancode_to_keycode(115)
    EXECUTE = scancode_to_keycode(116)
    HELP = scancode_to_keycode(117)
    MENU = scancode_to_keycode(118)
    SELECT = scancode_to_keycode(119)
    STOP = scancode_to_keycode(120)
    AGAIN = scancode_to_keycode(121)
    UNDO = scancode_to_keycode(122)
    CUT = scancode_to_keycode(123)
    COPY = scancode_to_keycode(124)
    PASTE = scancode_to_keycode(125)
    FIND = scancode_to_keycode(126)
    MUTE = scancode_to_keycode(127)
    VOLUMEUP = scancode_to_keycode(128)
    VOLUMEDOWN = scancode_to_keycode(129)
    KP_COMMA = scancode_to_keycode(133)
    KP_EQUALSAS400 = scancode_to_keycode(134)

    ALTERASE = scancode_to_keycode(153)
    SYSREQ = scancode_to_keycode(154)
    CANCEL = scancode_to_keycode(155)
    CLEAR = scancode_to_keycode(156)
    PRIOR = scancode_to_keycode(157)
    RETURN2 = scancode_to_keycode(158)
    SEPARATOR = scancode_to_keycode(159)
    KEY_OUT = scancode_to_keycode(160)
    OPER = scancode_to_keycode(161)
    CLEARAGAIN = scancode_to_keycode(162)
    CRSEL = scancode_to_keycode(163)
    EXSEL = scancode_to_keycode(164)

    KP_00 = scancode_to_keycode(176)
    KP_000 = scancode_to_keycode(177)
    THOUSANDSSEPARATOR = scancode_to_keycode(178)
    DECIMALSEPARATOR = scancode_to_keycode(179)
    CURRENCYUNIT = scancode_to_keycode(180)
    CURRENCYSUBUNIT = scancode_to_keycode(181)
    KP_LEFTPAREN = scancode_to_keycode(182)
    KP_RIGHTPAREN = scancode_to_keycode(183)
    KP_LEFTBRACE = scancode_to_keycode(184)
    KP_RIGHTBRACE = scancode_to_keycode(185)
    KP_TAB = scancode_to_keycode(186)
    KP_BACKSPACE = scancode_to_keycode(187)
    KP_A = scancode_to_keycode(188)
    KP_B = scancode_to_keycode(189)
    KP_C = scancode_to_keycode(190)
    KP_D = scancode_to_keycode(191)
    KP_E = scancode_to_keycode(192)
    KP_F = scancode_to_keycode(193)
    KP_XOR = scancode_to_keycode(194)
    KP_POWER = scancode_to_keycode(195)
    KP_PERCENT = scancode_to_keycode(196)
    KP_LESS = scancode_to_keycode(197)
    KP_GREATER = scancode_to_keycode(198)
    KP_AMPERSAND = scancode_to_keycode(199)
    KP_DBLAMPERSAND = scancode_to_keycode(200)
    KP_VERTICALBAR = scancode_to_keycode(201)
    KP_DBLVERTICALBAR = scancode_to_keycode(202)
    KP_COLON = scancode_to_keycode(203)
    KP_HASH = scancode_to_keycode(204)
    KP_SPACE = scancode_to_keycode(205)
    KP_AT = scancode_to_keycode(206)
    KP_EXCLAM = scancode_to_keycode(207)
    KP_MEMSTORE = scancode_to_keycode(208)
    KP_MEMRECALL = scancode_to_keycode(209)
    KP_MEMCLEAR = scancode_to_keycode(210)
    KP_MEMADD = scancode_to_keycode(211)
    KP_MEMSUBTRACT = scancode_to_keycode(212)
    KP_MEMMULTIPLY = scancode_to_keycode(213)
    KP_MEMDIVIDE = scancode_to_keycode(214)
    KP_PLUSMINUS = scancode_to_keycode(215)
    KP_CLEAR = scancode_to_keycode(216)
    KP_CLEARENTRY = scancode_to_keycode(217)
    KP_BINARY = scancode_to_keycode(218)
    KP_OCTAL = scancode_to_keycode(219)
    KP_DECIMAL = scancode_to_keycode(220)
    KP_HEXADECIMAL = scancode_to_keycode(221)

    LCTRL = scancode_to_keycode(224)
    LSHIFT = scancode_to_keycode(225)
    LALT = scancode_to_keycode(226)
    LGUI = scancode_to_keycode(227)
    RCTRL = scancode_to_keycode(228)
    RSHIFT = scancode_to_keycode(229)
    RALT = scancode_to_keycode(230)
    RGUI = scancode_to_keycode(231)

    MODE = scancode_to_keycode(257)

    AUDIONEXT = scancode_to_keycode(258)
    AUDIOPREV = scancode_to_keycode(259)
    AUDIOSTOP = scancode_to_keycode(260)
    AUDIOPLAY = scancode_to_keycode(261)
    AUDIOMUTE = scancode_to_keycode(262)
    MEDIASELECT = scancode_to_keycode(263)
    WWW = scancode_to_keycode(264)
    MAIL = scancode_to_keycode(265)
    CALCULATOR = scancode_to_keycode(266)
    COMPUTER = scancode_to_keycode(267)
    AC_SEARCH = scancode_to_keycode(268)
    AC_HOME = scancode_to_keycode(269)
    AC_BACK = scancode_to_keycode(270)
    AC_FORWARD = scancode_to_keycode(271)
    AC_STOP = scancode_to_keycode(272)
    AC_REFRESH = scancode_to_keycode(273)
    AC_BOOKMARKS = scancode_to_keycode(274)

    BRIGHTNESSDOWN = scancode_to_keycode(275)
    BRIGHTNESSUP = scancode_to_keycode(276)
    DISPLAYSWITCH = scancode_to_keycode(277)
    KBDILLUMTOGGLE = scancode_to_keycode(278)
    KBDILLUMDOWN = scancode_to_keycode(279)
    KBDILLUMUP = scancode_to_keycode(280)
    EJECT = scancode_to_keycode(281)
    SLEEP = scancode_to_keycode(282)
    APP1 = scancode_to_keycode(283)
    APP2 = scancode_to_keycode(284)

    AUDIOREWIND = scancode_to_keycode(285)
    AUDIOFASTFORWARD = scancode_to_keycode(286)

    SOFTLEFT = scancode_to_keycode(287)
    SOFTRIGHT = scancode_to_keycode(288)
    CALL = scancode_to_keycode(289)
    ENDCALL = scancode_to_keycode(290)

    @property
    def is_scancode_key(self) -> bool:
        """Whether this key's code is derived from a scancode."""
        return bool(self.value & SCANCODE_MASK)