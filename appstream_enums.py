#!/usr/bin/env python3
#
# Licensed under the GNU General Public License Version 2
#
# Open-world enumerations used by the AppStream object model

"""
Enumerations for the AppStream vocabulary.

AppStream keeps growing its vocabulary (new component kinds, URL types,
categories, ...). Every enumeration here is therefore "open": the known
tokens are Enum members, and anything else converts to Unknown, which keeps
the raw token so nothing seen in the document is lost.

Example:
	>>> ComponentKind.from_token("desktop")
	<ComponentKind.DESKTOP_APPLICATION: 'desktop-application'>
	>>> ComponentKind.from_token("hologram")
	Unknown(value='hologram')
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Unknown:
	"""Fallback variant for a token outside the known vocabulary."""

	value: str

	@property
	def name(self) -> str:
		return "UNKNOWN"

	def __str__(self) -> str:
		return self.value


class OpenEnum(str, Enum):
	"""Base for enumerations that degrade to Unknown instead of failing."""

	@classmethod
	def from_token(cls, raw: str | None) -> OpenEnum | Unknown | None:
		"""
		Convert a raw attribute or element token.

		Returns None when the token is absent, the matching member when it is
		known (aliases included) and Unknown otherwise. Never raises.
		"""
		if raw is None:
			return None
		token = raw.strip()
		try:
			return cls(token)
		except ValueError:
			return Unknown(token)

	def __str__(self) -> str:
		return self.value


# =============================================================================
# Component level
# =============================================================================

# Legacy and shorthand spellings still found in older catalogs
_COMPONENT_KIND_ALIASES = {
	"desktop": "desktop-application",
	"desktop-app": "desktop-application",
	"console": "console-application",
	"webapp": "web-application",
	"inputmethod": "input-method",
	"os": "operating-system",
}


class ComponentKind(OpenEnum):
	GENERIC = "generic"
	DESKTOP_APPLICATION = "desktop-application"
	CONSOLE_APPLICATION = "console-application"
	WEB_APPLICATION = "web-application"
	SERVICE = "service"
	ADDON = "addon"
	RUNTIME = "runtime"
	FONT = "font"
	CODEC = "codec"
	INPUT_METHOD = "input-method"
	OPERATING_SYSTEM = "operating-system"
	FIRMWARE = "firmware"
	DRIVER = "driver"
	LOCALIZATION = "localization"
	REPOSITORY = "repository"
	ICON_THEME = "icon-theme"
	THEME = "theme"

	@classmethod
	def _missing_(cls, value):
		alias = _COMPONENT_KIND_ALIASES.get(value)
		if alias is not None:
			return cls(alias)
		return None


class Category(OpenEnum):
	"""Categories from the freedesktop.org menu specification."""

	# Main categories
	AUDIO_VIDEO = "AudioVideo"
	AUDIO = "Audio"
	VIDEO = "Video"
	DEVELOPMENT = "Development"
	EDUCATION = "Education"
	GAME = "Game"
	GRAPHICS = "Graphics"
	NETWORK = "Network"
	OFFICE = "Office"
	SCIENCE = "Science"
	SETTINGS = "Settings"
	SYSTEM = "System"
	UTILITY = "Utility"
	# Additional categories
	BUILDING = "Building"
	DEBUGGER = "Debugger"
	IDE = "IDE"
	GUI_DESIGNER = "GUIDesigner"
	PROFILING = "Profiling"
	REVISION_CONTROL = "RevisionControl"
	TRANSLATION = "Translation"
	CALENDAR = "Calendar"
	CONTACT_MANAGEMENT = "ContactManagement"
	DATABASE = "Database"
	DICTIONARY = "Dictionary"
	CHART = "Chart"
	EMAIL = "Email"
	FINANCE = "Finance"
	FLOW_CHART = "FlowChart"
	PDA = "PDA"
	PROJECT_MANAGEMENT = "ProjectManagement"
	PRESENTATION = "Presentation"
	SPREADSHEET = "Spreadsheet"
	WORD_PROCESSOR = "WordProcessor"
	GRAPHICS_2D = "2DGraphics"
	VECTOR_GRAPHICS = "VectorGraphics"
	RASTER_GRAPHICS = "RasterGraphics"
	GRAPHICS_3D = "3DGraphics"
	SCANNING = "Scanning"
	OCR = "OCR"
	PHOTOGRAPHY = "Photography"
	PUBLISHING = "Publishing"
	VIEWER = "Viewer"
	TEXT_TOOLS = "TextTools"
	DESKTOP_SETTINGS = "DesktopSettings"
	HARDWARE_SETTINGS = "HardwareSettings"
	PRINTING = "Printing"
	PACKAGE_MANAGER = "PackageManager"
	DIALUP = "Dialup"
	INSTANT_MESSAGING = "InstantMessaging"
	CHAT = "Chat"
	IRC_CLIENT = "IRCClient"
	FEED = "Feed"
	FILE_TRANSFER = "FileTransfer"
	HAM_RADIO = "HamRadio"
	NEWS = "News"
	P2P = "P2P"
	REMOTE_ACCESS = "RemoteAccess"
	TELEPHONY = "Telephony"
	TELEPHONY_TOOLS = "TelephonyTools"
	VIDEO_CONFERENCE = "VideoConference"
	WEB_BROWSER = "WebBrowser"
	WEB_DEVELOPMENT = "WebDevelopment"
	MIDI = "Midi"
	MIXER = "Mixer"
	SEQUENCER = "Sequencer"
	TUNER = "Tuner"
	TV = "TV"
	AUDIO_VIDEO_EDITING = "AudioVideoEditing"
	PLAYER = "Player"
	RECORDER = "Recorder"
	DISC_BURNING = "DiscBurning"
	ACTION_GAME = "ActionGame"
	ADVENTURE_GAME = "AdventureGame"
	ARCADE_GAME = "ArcadeGame"
	BOARD_GAME = "BoardGame"
	BLOCKS_GAME = "BlocksGame"
	CARD_GAME = "CardGame"
	KIDS_GAME = "KidsGame"
	LOGIC_GAME = "LogicGame"
	ROLE_PLAYING = "RolePlaying"
	SHOOTER = "Shooter"
	SIMULATION = "Simulation"
	SPORTS_GAME = "SportsGame"
	STRATEGY_GAME = "StrategyGame"
	ART = "Art"
	CONSTRUCTION = "Construction"
	MUSIC = "Music"
	LANGUAGES = "Languages"
	ARTIFICIAL_INTELLIGENCE = "ArtificialIntelligence"
	ASTRONOMY = "Astronomy"
	BIOLOGY = "Biology"
	CHEMISTRY = "Chemistry"
	COMPUTER_SCIENCE = "ComputerScience"
	DATA_VISUALIZATION = "DataVisualization"
	ECONOMY = "Economy"
	ELECTRICITY = "Electricity"
	GEOGRAPHY = "Geography"
	GEOLOGY = "Geology"
	GEOSCIENCE = "Geoscience"
	HISTORY = "History"
	HUMANITIES = "Humanities"
	IMAGE_PROCESSING = "ImageProcessing"
	LITERATURE = "Literature"
	MAPS = "Maps"
	MATH = "Math"
	NUMERICAL_ANALYSIS = "NumericalAnalysis"
	MEDICAL_SOFTWARE = "MedicalSoftware"
	PHYSICS = "Physics"
	ROBOTICS = "Robotics"
	SPIRITUALITY = "Spirituality"
	SPORTS = "Sports"
	PARALLEL_COMPUTING = "ParallelComputing"
	AMUSEMENT = "Amusement"
	ARCHIVING = "Archiving"
	COMPRESSION = "Compression"
	ELECTRONICS = "Electronics"
	EMULATOR = "Emulator"
	ENGINEERING = "Engineering"
	FILE_TOOLS = "FileTools"
	FILE_MANAGER = "FileManager"
	TERMINAL_EMULATOR = "TerminalEmulator"
	FILESYSTEM = "Filesystem"
	MONITOR = "Monitor"
	SECURITY = "Security"
	ACCESSIBILITY = "Accessibility"
	CALCULATOR = "Calculator"
	CLOCK = "Clock"
	TEXT_EDITOR = "TextEditor"
	DOCUMENTATION = "Documentation"
	ADULT = "Adult"
	CORE = "Core"
	KDE = "KDE"
	GNOME = "GNOME"
	XFCE = "XFCE"
	DDE = "DDE"
	GTK = "GTK"
	QT = "Qt"
	MOTIF = "Motif"
	JAVA = "Java"
	CONSOLE_ONLY = "ConsoleOnly"
	# Reserved categories
	SCREENSAVER = "Screensaver"
	TRAY_ICON = "TrayIcon"
	APPLET = "Applet"
	SHELL = "Shell"


class Kudo(OpenEnum):
	APP_MENU = "AppMenu"
	HI_DPI_ICON = "HiDpiIcon"
	HIGH_CONTRAST = "HighContrast"
	MODERN_TOOLKIT = "ModernToolkit"
	NOTIFICATIONS = "Notifications"
	SEARCH_PROVIDER = "SearchProvider"
	USER_DOCS = "UserDocs"


class UrlKind(OpenEnum):
	HOMEPAGE = "homepage"
	BUGTRACKER = "bugtracker"
	FAQ = "faq"
	HELP = "help"
	DONATION = "donation"
	TRANSLATE = "translate"
	CONTACT = "contact"
	VCS_BROWSER = "vcs-browser"
	CONTRIBUTE = "contribute"


class LaunchableKind(OpenEnum):
	DESKTOP_ID = "desktop-id"
	SERVICE = "service"
	COCKPIT_MANIFEST = "cockpit-manifest"
	URL = "url"


class ProvideKind(OpenEnum):
	LIBRARY = "library"
	BINARY = "binary"
	FONT = "font"
	MODALIAS = "modalias"
	FIRMWARE = "firmware"
	PYTHON2 = "python2"
	PYTHON3 = "python3"
	DBUS = "dbus"
	ID = "id"
	CODEC = "codec"
	MEDIATYPE = "mediatype"
	MIMETYPE = "mimetype"


class BundleKind(OpenEnum):
	PACKAGE = "package"
	LIMBA = "limba"
	FLATPAK = "flatpak"
	APPIMAGE = "appimage"
	SNAP = "snap"
	TARBALL = "tarball"
	CABINET = "cabinet"
	LINGLONG = "linglong"
	SYSUPDATE = "sysupdate"


class IconKind(OpenEnum):
	STOCK = "stock"
	CACHED = "cached"
	LOCAL = "local"
	REMOTE = "remote"


class TranslationKind(OpenEnum):
	GETTEXT = "gettext"
	QT = "qt"


class RequirementKind(OpenEnum):
	ID = "id"
	CONTROL = "control"
	DISPLAY_LENGTH = "display_length"
	MODALIAS = "modalias"
	KERNEL = "kernel"
	MEMORY = "memory"
	FIRMWARE = "firmware"
	HARDWARE = "hardware"
	INTERNET = "internet"


# =============================================================================
# Releases
# =============================================================================


class ReleaseType(OpenEnum):
	STABLE = "stable"
	DEVELOPMENT = "development"
	SNAPSHOT = "snapshot"


class ReleaseUrgency(OpenEnum):
	LOW = "low"
	MEDIUM = "medium"
	HIGH = "high"
	CRITICAL = "critical"


class ReleaseSizeKind(OpenEnum):
	DOWNLOAD = "download"
	INSTALLED = "installed"


class ArtifactKind(OpenEnum):
	SOURCE = "source"
	BINARY = "binary"


class ChecksumKind(OpenEnum):
	SHA1 = "sha1"
	SHA256 = "sha256"
	SHA512 = "sha512"
	BLAKE2B = "blake2b"
	BLAKE2S = "blake2s"


# =============================================================================
# Screenshots
# =============================================================================


class ScreenshotKind(OpenEnum):
	DEFAULT = "default"
	EXTRA = "extra"


class ImageKind(OpenEnum):
	SOURCE = "source"
	THUMBNAIL = "thumbnail"


# =============================================================================
# Content rating (OARS)
# =============================================================================


class ContentRatingVersion(OpenEnum):
	OARS_1_0 = "oars-1.0"
	OARS_1_1 = "oars-1.1"

	@property
	def rank(self) -> int:
		return list(ContentRatingVersion).index(self) + 1


class ContentAttribute(OpenEnum):
	VIOLENCE_CARTOON = "violence-cartoon"
	VIOLENCE_FANTASY = "violence-fantasy"
	VIOLENCE_REALISTIC = "violence-realistic"
	VIOLENCE_BLOODSHED = "violence-bloodshed"
	VIOLENCE_SEXUAL = "violence-sexual"
	VIOLENCE_DESECRATION = "violence-desecration"
	VIOLENCE_SLAVERY = "violence-slavery"
	VIOLENCE_WORSHIP = "violence-worship"
	DRUGS_ALCOHOL = "drugs-alcohol"
	DRUGS_NARCOTICS = "drugs-narcotics"
	DRUGS_TOBACCO = "drugs-tobacco"
	SEX_NUDITY = "sex-nudity"
	SEX_THEMES = "sex-themes"
	SEX_HOMOSEXUALITY = "sex-homosexuality"
	SEX_PROSTITUTION = "sex-prostitution"
	SEX_ADULTERY = "sex-adultery"
	SEX_APPEARANCE = "sex-appearance"
	LANGUAGE_PROFANITY = "language-profanity"
	LANGUAGE_HUMOR = "language-humor"
	LANGUAGE_DISCRIMINATION = "language-discrimination"
	SOCIAL_CHAT = "social-chat"
	SOCIAL_INFO = "social-info"
	SOCIAL_AUDIO = "social-audio"
	SOCIAL_LOCATION = "social-location"
	SOCIAL_CONTACTS = "social-contacts"
	MONEY_PURCHASING = "money-purchasing"
	MONEY_ADVERTISING = "money-advertising"
	MONEY_GAMBLING = "money-gambling"


class ContentState(OpenEnum):
	NONE = "none"
	MILD = "mild"
	MODERATE = "moderate"
	INTENSE = "intense"
