"""
Enumerated option sets and section identifiers.

Every tuple here is the complete allowed set for one option field. Order
matters: it is the order shown in "option is invalid" messages and in the
exported JSON Schema.
"""

DEGREE_OPTIONS = (
    "Middle School",
    "High School",
    "Diploma",
    "Associate",
    "Bachelor",
    "Master",
    "Doctor",
)

FLUENCY_OPTIONS = (
    "Elementary Proficiency",
    "Limited Working Proficiency",
    "Minimum Professional Proficiency",
    "Full Professional Proficiency",
    "Native or Bilingual Proficiency",
)

LEVEL_OPTIONS = (
    "Novice",
    "Beginner",
    "Intermediate",
    "Advanced",
    "Expert",
    "Master",
)

LOCALE_LANGUAGE_OPTIONS = ("en", "zh-hans", "zh-hant-hk", "zh-hant-tw", "es", "fr", "no")

CJK_LOCALES = ("zh-hans", "zh-hant-hk", "zh-hant-tw")

NETWORK_OPTIONS = (
    "Behance",
    "Dribbble",
    "Facebook",
    "GitHub",
    "Gitlab",
    "Instagram",
    "Line",
    "LinkedIn",
    "Medium",
    "Pinterest",
    "Reddit",
    "Snapchat",
    "Stack Overflow",
    "Telegram",
    "TikTok",
    "Twitch",
    "Twitter",
    "Vimeo",
    "Weibo",
    "WeChat",
    "WhatsApp",
    "YouTube",
    "Zhihu",
)

LANGUAGE_OPTIONS = (
    "Afrikaans",
    "Albanian",
    "Amharic",
    "Arabic",
    "Azerbaijani",
    "Belarusian",
    "Bengali",
    "Bhojpuri",
    "Bulgarian",
    "Burmese",
    "Cantonese",
    "Catalan",
    "Chinese",
    "Croatian",
    "Czech",
    "Danish",
    "Dutch",
    "English",
    "Estonian",
    "Farsi",
    "Filipino",
    "Finnish",
    "French",
    "German",
    "Greek",
    "Gujarati",
    "Hausa",
    "Hebrew",
    "Hindi",
    "Hungarian",
    "Icelandic",
    "Igbo",
    "Indonesian",
    "Irish",
    "Italian",
    "Japanese",
    "Javanese",
    "Kazakh",
    "Khmer",
    "Korean",
    "Lahnda",
    "Latvian",
    "Lithuanian",
    "Malay",
    "Mandarin",
    "Marathi",
    "Nepali",
    "Norwegian",
    "Oromo",
    "Pashto",
    "Polish",
    "Portuguese",
    "Romanian",
    "Russian",
    "Serbian",
    "Shona",
    "Sinhala",
    "Slovak",
    "Slovene",
    "Somali",
    "Spanish",
    "Sundanese",
    "Swahili",
    "Swedish",
    "Tagalog",
    "Tamil",
    "Telugu",
    "Thai",
    "Turkish",
    "Ukrainian",
    "Urdu",
    "Uzbek",
    "Vietnamese",
    "Yoruba",
    "Zulu",
)

COUNTRY_OPTIONS = (
    "Argentina",
    "Australia",
    "Austria",
    "Bangladesh",
    "Belgium",
    "Brazil",
    "Canada",
    "Chile",
    "China",
    "Colombia",
    "Czech Republic",
    "Denmark",
    "Egypt",
    "Finland",
    "France",
    "Germany",
    "Greece",
    "Hong Kong",
    "Hungary",
    "India",
    "Indonesia",
    "Ireland",
    "Israel",
    "Italy",
    "Japan",
    "Kenya",
    "Malaysia",
    "Mexico",
    "Netherlands",
    "New Zealand",
    "Nigeria",
    "Norway",
    "Pakistan",
    "Peru",
    "Philippines",
    "Poland",
    "Portugal",
    "Romania",
    "Russia",
    "Saudi Arabia",
    "Singapore",
    "South Africa",
    "South Korea",
    "Spain",
    "Sweden",
    "Switzerland",
    "Taiwan",
    "Thailand",
    "Turkey",
    "Ukraine",
    "United Arab Emirates",
    "United Kingdom",
    "United States",
    "Vietnam",
)

ENGINE_OPTIONS = ("latex", "html", "markdown")

LATEX_TEMPLATE_OPTIONS = ("moderncv-banking", "moderncv-casual", "moderncv-classic")
HTML_TEMPLATE_OPTIONS = ("calm",)
TEMPLATE_OPTIONS = LATEX_TEMPLATE_OPTIONS + HTML_TEMPLATE_OPTIONS

TEMPLATES_BY_ENGINE = {
    "latex": LATEX_TEMPLATE_OPTIONS,
    "html": HTML_TEMPLATE_OPTIONS,
    "markdown": (),
}

LATEX_FONT_SIZE_OPTIONS = ("10pt", "11pt", "12pt")
HTML_FONT_SIZE_OPTIONS = tuple(f"{size}px" for size in range(10, 25))
FONT_SIZE_OPTIONS = LATEX_FONT_SIZE_OPTIONS + HTML_FONT_SIZE_OPTIONS

FONTSPEC_NUMBERS_OPTIONS = ("Lining", "OldStyle", "Auto")

PAPER_SIZE_OPTIONS = ("a4", "letter")

SECTION_IDS = (
    "basics",
    "location",
    "profiles",
    "education",
    "work",
    "volunteer",
    "awards",
    "certificates",
    "publications",
    "skills",
    "languages",
    "interests",
    "references",
    "projects",
)

ORDERABLE_SECTION_IDS = tuple(
    section for section in SECTION_IDS if section not in ("location", "profiles")
)

# core info, education and career, languages and skills, paper credentials,
# people and projects, then non-essential information
DEFAULT_SECTIONS_ORDER = (
    "basics",
    "education",
    "work",
    "languages",
    "skills",
    "awards",
    "certificates",
    "publications",
    "references",
    "projects",
    "interests",
    "volunteer",
)


def merge_order(custom_order, default_order=DEFAULT_SECTIONS_ORDER):
    """
    Merge a custom section order with the default one.

    Custom entries come first (duplicates and ids missing from the default
    order are dropped), the remaining defaults follow in their default order.

    Example:
        >>> merge_order(["work", "education"], ("basics", "education", "work", "skills"))
        ['work', 'education', 'basics', 'skills']
    """
    merged = []
    for section in custom_order or ():
        if section in default_order and section not in merged:
            merged.append(section)

    merged.extend(section for section in default_order if section not in merged)
    return merged
