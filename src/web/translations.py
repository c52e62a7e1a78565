"""User interface strings in English and Amharic."""

TRANSLATIONS = {
    "en": {
        "title": "Addis Taxi Route Finder",
        "subtitle": "Find the shortest minibus taxi path across the city.",
        "mapHeader": "Live Location & Stations Map (Simulated)",
        "startLabel": "Departure Station (From)",
        "endLabel": "Destination Station (To)",
        "selectStart": "Select starting station",
        "selectEnd": "Select destination station",
        "searchButton": "Find Route",
        "resultsTitle": "Journey Results",
        "directRoute": "Direct Route",
        "transferRoute": "One Transfer Required",
        "stops": "Stops",
        "route": "Route",
        "transferStation": "Transfer Station",
        "firstTrip": "1st Trip:",
        "secondTrip": "2nd Trip:",
        "noRouteFound": "No direct or single-transfer route found.",
        "placeholderText": "Select start and end points and search for a route.",
        "languageToggle": "አማርኛ",
        "errorTitle": "Oops! An Issue Occurred",
        "errorInstruction": "Please ensure your selection is valid.",
        "fareGuideButton": "✨ Fare Guide",
        "fareGuideTitle": "Taxi Fare Advice",
        "phraseGeneratorButton": "✨ Amharic Phrases",
        "phraseGeneratorTitle": "Essential Amharic for the Trip",
        "phrasePlay": "Play",
        "phraseLoading": "Loading Audio...",
        "fareLoading": "Calculating Fair Price...",
        "advisoryButton": "✨ Route Advisory",
        "advisoryTitle": "Current Route Status",
        "advisoryLoading": "Checking traffic and road conditions...",
        "alternativeButton": "✨ Alternative Transport",
        "alternativeTitle": "Mode Comparison",
        "alternativeLoading": "Analyzing alternative modes...",
        "nearestStation": "Nearest station",
    },
    "am": {
        "title": "ታክሲ ተራ መፈለጊያ",
        "subtitle": "የአዲስ አበባን የጉዞ መስመር በቀላሉ ያግኙ",
        "mapHeader": "የቀጥታ ቦታ እና የታክሲ ተራዎች ካርታ (የተገመተ)",
        "startLabel": "መነሻ (ከየት)",
        "endLabel": "መድረሻ (ወዴት)",
        "selectStart": "የመነሻ ተራ ይምረጡ",
        "selectEnd": "የመድረሻ ተራ ይምረጡ",
        "searchButton": "መስመር ፈልግ",
        "resultsTitle": "የጉዞ ውጤቶች",
        "directRoute": "ቀጥተኛ መስመር",
        "transferRoute": "አንድ ጊዜ ቀይር",
        "stops": "መቆሚያዎች",
        "route": "መስመር",
        "transferStation": "መለወጫ ተራ",
        "firstTrip": "1ኛ ጉዞ:",
        "secondTrip": "2ኛ ጉዞ:",
        "noRouteFound": "ቀጥተኛ ወይም አንድ ጊዜ መቀየር የሚቻልበት መንገድ አልተገኘም።",
        "placeholderText": "መነሻና መድረሻ ይምረጡና መስመር ይፈልጉ።",
        "languageToggle": "English",
        "errorTitle": "አይ! ችግር ተፈጥሯል",
        "errorInstruction": "የመረጧቸው ተራዎች ትክክል መሆናቸውን ያረጋግጡ።",
        "fareGuideButton": "✨ የታሪፍ መመሪያ",
        "fareGuideTitle": "የታክሲ ዋጋ ምክር",
        "phraseGeneratorButton": "✨ የአማርኛ ቃላት",
        "phraseGeneratorTitle": "ለጉዞ የሚያስፈልጉ የአማርኛ ቃላት",
        "phrasePlay": "አጫውት",
        "phraseLoading": "ድምጽ በመጫን ላይ...",
        "fareLoading": "ትክክለኛ ዋጋ በመስራት ላይ...",
        "advisoryButton": "✨ የመንገድ ምክር",
        "advisoryTitle": "የመንገድ ሁኔታ",
        "advisoryLoading": "ትራፊክ እና የመንገድ ሁኔታዎችን በመፈተሽ ላይ...",
        "alternativeButton": "✨ አማራጭ ትራንስፖርት",
        "alternativeTitle": "የጉዞ አይነቶች ንፅፅር",
        "alternativeLoading": "አማራጭ የመጓጓዣ መንገዶችን በመተንተን ላይ...",
        "nearestStation": "ቅርብ ተራ",
    },
}


def translate(key: str, language: str = "en") -> str:
    """UI string for a key, falling back to English and then to the key itself."""
    strings = TRANSLATIONS.get(language, TRANSLATIONS["en"])
    return strings.get(key) or TRANSLATIONS["en"].get(key, key)


def strings_for(language: str) -> dict[str, str]:
    """All UI strings for a language, English filling any gaps."""
    return {**TRANSLATIONS["en"], **TRANSLATIONS.get(language, {})}
