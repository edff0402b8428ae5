"""
Curated per-language dream vocabulary.

Keywords are grouped in semantic categories; the tagger uses the category to
keep the final tag list thematically diverse. Also holds the stopword,
function-word and fallback tables shared by the extractors and the
consolidator.
"""

from typing import Dict, List, Tuple

# ----------------------------
# Keyword categories
# ----------------------------

CATEGORY_KEYWORDS: Dict[str, Dict[str, List[str]]] = {
    "places": {
        "en": [
            "house", "home", "building", "city", "town", "village", "school", "office",
            "hospital", "church", "park", "garden", "castle", "room", "bridge", "prison",
            "library", "airport", "subway", "train", "airplane", "car", "road", "street",
            "station", "ship", "boat", "elevator", "stairs", "hallway",
        ],
        "it": [
            "casa", "edificio", "città", "paese", "villaggio", "scuola", "ufficio",
            "ospedale", "chiesa", "parco", "giardino", "castello", "stanza", "ponte",
            "prigione", "biblioteca", "aeroporto", "metropolitana", "treno", "aereo",
            "auto", "strada", "stazione", "nave", "barca", "ascensore", "scale", "corridoio",
        ],
        "es": [
            "casa", "edificio", "ciudad", "pueblo", "escuela", "oficina", "hospital",
            "iglesia", "parque", "jardín", "castillo", "habitación", "puente", "prisión",
            "biblioteca", "aeropuerto", "metro", "tren", "avión", "coche", "carretera",
            "calle", "estación", "barco", "ascensor", "escaleras", "pasillo",
        ],
        "fr": [
            "maison", "bâtiment", "ville", "village", "école", "bureau", "hôpital",
            "église", "parc", "jardin", "château", "chambre", "pont", "prison",
            "bibliothèque", "aéroport", "métro", "train", "avion", "voiture", "route",
            "rue", "gare", "bateau", "navire", "ascenseur", "escalier", "couloir",
        ],
        "de": [
            "haus", "gebäude", "stadt", "dorf", "schule", "büro", "krankenhaus",
            "kirche", "park", "garten", "schloss", "zimmer", "brücke", "gefängnis",
            "bibliothek", "flughafen", "u-bahn", "zug", "flugzeug", "auto", "straße",
            "bahnhof", "schiff", "boot", "aufzug", "treppe", "flur",
        ],
    },
    "landscape": {
        "en": [
            "mountain", "mountains", "ocean", "sea", "beach", "forest", "woods", "jungle",
            "desert", "river", "lake", "island", "cave", "valley", "hill", "cliff",
            "field", "waterfall", "meadow", "volcano", "underwater",
        ],
        "it": [
            "montagna", "montagne", "oceano", "mare", "spiaggia", "foresta", "bosco",
            "giungla", "deserto", "fiume", "lago", "isola", "grotta", "valle", "collina",
            "scogliera", "campo", "cascata", "prato", "vulcano", "sott'acqua",
        ],
        "es": [
            "montaña", "montañas", "océano", "mar", "playa", "bosque", "selva",
            "desierto", "río", "lago", "isla", "cueva", "valle", "colina", "acantilado",
            "campo", "cascada", "prado", "volcán",
        ],
        "fr": [
            "montagne", "montagnes", "océan", "mer", "plage", "forêt", "bois", "jungle",
            "désert", "rivière", "lac", "île", "grotte", "vallée", "colline", "falaise",
            "champ", "cascade", "prairie", "volcan", "sous-marin",
        ],
        "de": [
            "berg", "berge", "ozean", "meer", "strand", "wald", "dschungel", "wüste",
            "fluss", "see", "insel", "höhle", "tal", "hügel", "klippe", "feld",
            "wasserfall", "wiese", "vulkan", "unterwasser",
        ],
    },
    "astronomy": {
        "en": [
            "sky", "space", "spaceship", "spacecraft", "ufo", "mars", "moon", "planet",
            "galaxy", "universe", "rocket", "shuttle", "satellite", "stars", "comet",
            "sun", "orbit",
        ],
        "it": [
            "cielo", "spazio", "astronave", "navicella", "astronavi", "ufo", "marte",
            "luna", "pianeta", "galassia", "universo", "razzo", "navetta", "satellite",
            "stelle", "cometa", "sole", "orbita",
        ],
        "es": [
            "cielo", "espacio", "nave espacial", "ovni", "marte", "luna", "planeta",
            "galaxia", "universo", "cohete", "satélite", "estrellas", "cometa", "sol",
            "órbita",
        ],
        "fr": [
            "ciel", "espace", "vaisseau spatial", "vaisseau", "ovni", "mars", "lune",
            "planète", "galaxie", "univers", "fusée", "navette", "satellite", "étoiles",
            "comète", "soleil", "orbite",
        ],
        "de": [
            "himmel", "weltraum", "raumschiff", "ufo", "mars", "mond", "planet",
            "galaxie", "universum", "rakete", "satellit", "sterne", "komet", "sonne",
            "umlaufbahn",
        ],
    },
    "actions": {
        "en": [
            "flying", "falling", "running", "swimming", "walking", "jumping", "climbing",
            "fighting", "hiding", "escaping", "chasing", "searching", "finding", "losing",
            "talking", "singing", "dancing", "eating", "drinking", "sleeping", "waking",
            "traveling", "driving", "riding", "sailing", "diving", "floating", "exploring",
            "teleporting", "landing", "launching", "hovering",
        ],
        "it": [
            "volare", "volavo", "volando", "cadere", "correre", "nuotare", "camminare",
            "saltare", "arrampicare", "combattere", "nascondere", "fuggire", "inseguire",
            "cercare", "trovare", "perdere", "parlare", "cantare", "ballare", "mangiare",
            "bere", "dormire", "svegliare", "viaggiare", "viaggiando", "guidare",
            "cavalcare", "navigare", "tuffare", "galleggiare", "esplorare", "esplorando",
            "teletrasportare", "atterrare", "lanciare", "fluttuare",
        ],
        "es": [
            "volar", "volando", "caer", "correr", "nadar", "caminar", "saltar", "escalar",
            "luchar", "esconder", "escapar", "perseguir", "buscar", "encontrar", "perder",
            "hablar", "cantar", "bailar", "comer", "beber", "dormir", "despertar",
            "viajar", "conducir", "montar", "navegar", "sumergir", "flotar", "explorar",
        ],
        "fr": [
            "voler", "tomber", "courir", "nager", "marcher", "sauter", "grimper",
            "combattre", "cacher", "échapper", "poursuivre", "chercher", "trouver",
            "perdre", "parler", "chanter", "danser", "manger", "boire", "dormir",
            "réveiller", "voyager", "conduire", "monter", "naviguer", "plonger",
            "flotter", "explorer",
        ],
        "de": [
            "fliegen", "fallen", "rennen", "schwimmen", "gehen", "springen", "klettern",
            "kämpfen", "verstecken", "entkommen", "jagen", "suchen", "finden",
            "verlieren", "sprechen", "singen", "tanzen", "essen", "trinken", "schlafen",
            "aufwachen", "reisen", "fahren", "reiten", "segeln", "tauchen", "schweben",
        ],
    },
    "emotions": {
        "en": [
            "fear", "afraid", "scared", "happy", "excited", "sad", "angry", "confused",
            "lost", "alone", "trapped", "free", "peaceful", "calm", "anxious", "stressed",
            "overwhelmed", "love", "hate", "joy", "sorrow", "surprise", "disgust", "shame",
        ],
        "it": [
            "paura", "spaventato", "terrorizzato", "felice", "eccitato", "triste",
            "arrabbiato", "confuso", "perso", "intrappolato", "libero", "pacifico",
            "calmo", "ansioso", "stressato", "sopraffatto", "amore", "odio", "gioia",
            "dolore", "sorpresa", "disgusto", "vergogna",
        ],
        "es": [
            "miedo", "asustado", "aterrado", "feliz", "emocionado", "triste", "enfadado",
            "confundido", "perdido", "atrapado", "libre", "pacífico", "tranquilo",
            "ansioso", "estresado", "abrumado", "amor", "odio", "alegría", "tristeza",
            "sorpresa", "asco", "vergüenza",
        ],
        "fr": [
            "peur", "effrayé", "terrifié", "heureux", "excité", "triste", "colère",
            "confus", "perdu", "seul", "piégé", "libre", "paisible", "calme", "anxieux",
            "stressé", "débordé", "amour", "haine", "joie", "chagrin", "surprise",
            "dégoût", "honte",
        ],
        "de": [
            "angst", "ängstlich", "erschrocken", "glücklich", "aufgeregt", "traurig",
            "wütend", "verwirrt", "verloren", "allein", "gefangen", "frei", "friedlich",
            "ruhig", "besorgt", "gestresst", "überfordert", "liebe", "hass", "freude",
            "kummer", "überraschung", "ekel", "scham",
        ],
    },
    "characters": {
        "en": [
            "family", "friend", "stranger", "monster", "animal", "dog", "cat", "bird",
            "snake", "spider", "insect", "bear", "wolf", "lion", "tiger", "fish", "shark",
            "human", "child", "mother", "father", "sister", "brother", "ghost", "spirit",
            "angel", "demon", "alien", "aliens", "extraterrestrial", "robot", "astronaut",
            "zombie",
        ],
        "it": [
            "famiglia", "amico", "sconosciuto", "mostro", "animale", "cane", "gatto",
            "uccello", "serpente", "ragno", "insetto", "orso", "lupo", "leone", "tigre",
            "pesce", "squalo", "umano", "bambino", "madre", "padre", "sorella",
            "fratello", "fantasma", "spirito", "angelo", "demone", "alieno", "alieni",
            "extraterrestre", "robot", "astronauta", "zombi",
        ],
        "es": [
            "familia", "amigo", "extraño", "monstruo", "animal", "perro", "gato",
            "pájaro", "serpiente", "araña", "insecto", "oso", "lobo", "león", "tigre",
            "pez", "tiburón", "humano", "niño", "madre", "padre", "hermana", "hermano",
            "fantasma", "espíritu", "ángel", "demonio", "extraterrestre", "robot",
            "astronauta", "zombi",
        ],
        "fr": [
            "famille", "ami", "étranger", "monstre", "animal", "chien", "chat", "oiseau",
            "serpent", "araignée", "insecte", "ours", "loup", "lion", "tigre", "poisson",
            "requin", "humain", "enfant", "mère", "père", "soeur", "frère", "fantôme",
            "esprit", "ange", "démon", "extraterrestre", "robot", "astronaute", "zombie",
        ],
        "de": [
            "familie", "freund", "fremder", "monster", "tier", "hund", "katze", "vogel",
            "schlange", "spinne", "insekt", "bär", "wolf", "löwe", "tiger", "fisch",
            "hai", "mensch", "kind", "mutter", "vater", "schwester", "bruder", "geist",
            "seele", "engel", "dämon", "alien", "außerirdischer", "roboter", "astronaut",
            "zombie",
        ],
    },
    "elements": {
        "en": [
            "water", "fire", "earth", "air", "wind", "light", "dark", "darkness", "cloud",
            "rain", "snow", "ice", "storm", "thunder", "lightning", "rainbow", "shadow",
            "nature", "tree", "flower", "rock",
        ],
        "it": [
            "acqua", "fuoco", "terra", "aria", "vento", "luce", "buio", "oscurità",
            "nuvola", "pioggia", "neve", "ghiaccio", "tempesta", "tuono", "fulmine",
            "arcobaleno", "ombra", "natura", "albero", "fiore", "roccia",
        ],
        "es": [
            "agua", "fuego", "tierra", "aire", "viento", "luz", "oscuro", "oscuridad",
            "nube", "lluvia", "nieve", "hielo", "tormenta", "trueno", "relámpago",
            "arcoíris", "sombra", "naturaleza", "árbol", "flor", "roca",
        ],
        "fr": [
            "eau", "feu", "terre", "air", "vent", "lumière", "sombre", "obscurité",
            "nuage", "pluie", "neige", "glace", "tempête", "tonnerre", "éclair",
            "arc-en-ciel", "ombre", "nature", "arbre", "fleur", "rocher",
        ],
        "de": [
            "wasser", "feuer", "erde", "luft", "wind", "licht", "dunkel", "dunkelheit",
            "wolke", "regen", "schnee", "eis", "sturm", "donner", "blitz", "regenbogen",
            "schatten", "natur", "baum", "blume", "felsen",
        ],
    },
    "concepts": {
        "en": [
            "time", "death", "life", "birth", "future", "past", "memory", "dream",
            "nightmare", "reality", "fantasy", "magic", "power", "control", "freedom",
            "escape", "transformation", "change", "beginning", "end", "infinity",
            "world", "dimension", "portal", "door",
        ],
        "it": [
            "tempo", "morte", "vita", "nascita", "futuro", "passato", "memoria", "sogno",
            "incubo", "realtà", "fantasia", "magia", "potere", "controllo", "libertà",
            "fuga", "trasformazione", "cambiamento", "inizio", "fine", "infinito",
            "mondo", "dimensione", "portale", "porta",
        ],
        "es": [
            "tiempo", "muerte", "vida", "nacimiento", "futuro", "pasado", "memoria",
            "sueño", "pesadilla", "realidad", "fantasía", "magia", "poder", "control",
            "libertad", "escape", "transformación", "cambio", "comienzo", "fin",
            "infinito", "mundo", "dimensión", "portal", "puerta",
        ],
        "fr": [
            "temps", "mort", "vie", "naissance", "futur", "passé", "mémoire", "rêve",
            "cauchemar", "réalité", "fantaisie", "magie", "pouvoir", "contrôle",
            "liberté", "évasion", "transformation", "changement", "début", "fin",
            "infini", "monde", "dimension", "portail", "porte",
        ],
        "de": [
            "zeit", "tod", "leben", "geburt", "zukunft", "vergangenheit", "erinnerung",
            "traum", "albtraum", "realität", "fantasie", "magie", "kraft", "kontrolle",
            "freiheit", "flucht", "verwandlung", "veränderung", "anfang", "ende",
            "unendlichkeit", "welt", "dimension", "portal", "tür",
        ],
    },
}


def keyword_categories(lang: str) -> Dict[str, str]:
    """keyword -> category for one language; the first category listing a keyword wins."""
    out: Dict[str, str] = {}
    for category, by_lang in CATEGORY_KEYWORDS.items():
        for kw in by_lang.get(lang, []):
            out.setdefault(kw, category)
    return out


# ----------------------------
# Verb inflection (conjugation-aware lexicon pass)
# ----------------------------

# Infinitive endings stripped to get a verb root
INFINITIVE_ENDINGS: Dict[str, Tuple[str, ...]] = {
    "it": ("are", "ere", "ire"),
    "es": ("ar", "er", "ir"),
    "fr": ("er", "ir", "re"),
    "de": ("en",),
}

# ----------------------------
# Contextual co-occurrence rules
# ----------------------------
# (triggers, also_requires, (tag, category, score)); trigger words match as
# prefixes at a word start, an empty also_requires means the trigger suffices.

CONTEXT_RULES: Dict[str, List[Tuple[Tuple[str, ...], Tuple[str, ...], Tuple[str, str, float]]]] = {
    "en": [
        (("spaceship", "spacecraft", "rocket"), ("alien", "extraterr", "martian"), ("alien", "characters", 8.0)),
        (("going", "went", "travel"), ("mars", "planet"), ("space", "astronomy", 9.0)),
    ],
    "it": [
        (("astronave", "navicella"), (), ("astronave", "astronomy", 9.0)),
        (("astronave", "navicella"), ("alien", "extraterr", "marz"), ("alieno", "characters", 8.0)),
        (("andare", "andavamo", "andando"), ("marte", "pianeta"), ("spazio", "astronomy", 9.0)),
    ],
    "es": [
        (("nave espacial", "cohete"), ("alien", "extraterr", "marcian"), ("extraterrestre", "characters", 8.0)),
        (("íbamos", "viajar", "viajábamos"), ("marte", "planeta"), ("espacio", "astronomy", 9.0)),
    ],
    "fr": [
        (("vaisseau", "fusée"), ("alien", "extraterr", "martien"), ("extraterrestre", "characters", 8.0)),
        (("allions", "aller", "voyage"), ("mars", "planète"), ("espace", "astronomy", 9.0)),
    ],
    "de": [
        (("raumschiff", "rakete"), ("alien", "außerirdisch"), ("alien", "characters", 8.0)),
        (("fuhren", "flogen", "reisen"), ("mars", "planet"), ("weltraum", "astronomy", 9.0)),
    ],
}

# ----------------------------
# Fallback tags
# ----------------------------

FALLBACK_TAGS: Dict[str, List[str]] = {
    "en": ["dream", "mystery", "experience"],
    "it": ["sogno", "mistero", "esperienza"],
    "es": ["sueño", "misterio", "experiencia"],
    "fr": ["rêve", "mystère", "expérience"],
    "de": ["traum", "mysterium", "erfahrung"],
}

# ----------------------------
# Function words, auxiliaries, stopwords
# ----------------------------

# Articles, prepositions and conjunctions: never valid inside a tag
FUNCTION_WORDS: Dict[str, set] = {
    "en": {
        "the", "a", "an", "and", "or", "but", "nor", "so", "yet", "if", "because",
        "while", "of", "in", "on", "at", "to", "for", "from", "with", "by", "as",
        "over", "under", "into", "onto", "through", "about", "above", "below",
        "between", "among", "after", "before", "behind", "near", "across", "toward",
        "towards", "without", "within", "around", "upon", "than", "that", "then",
    },
    "it": {
        "il", "lo", "la", "i", "gli", "le", "un", "uno", "una", "e", "ed", "o", "ma",
        "se", "perché", "mentre", "di", "a", "da", "in", "con", "su", "per", "tra",
        "fra", "del", "dello", "della", "dei", "degli", "delle", "al", "allo", "alla",
        "ai", "agli", "alle", "dal", "dalla", "dai", "nel", "nello", "nella", "nei",
        "negli", "nelle", "sul", "sulla", "sui", "sopra", "sotto", "dentro", "fuori",
        "verso", "dopo", "prima", "che", "poi", "quando",
    },
    "es": {
        "el", "la", "los", "las", "un", "una", "unos", "unas", "y", "e", "o", "u",
        "pero", "si", "porque", "mientras", "de", "a", "en", "con", "por", "para",
        "sin", "sobre", "bajo", "entre", "hacia", "hasta", "desde", "del", "al",
        "tras", "durante", "que", "luego", "cuando",
    },
    "fr": {
        "le", "la", "les", "un", "une", "des", "du", "de", "et", "ou", "mais", "donc",
        "car", "si", "parce", "pendant", "à", "au", "aux", "en", "dans", "sur", "sous",
        "avec", "sans", "pour", "par", "vers", "chez", "entre", "avant", "après",
        "que", "puis", "quand", "l", "d",
    },
    "de": {
        "der", "die", "das", "den", "dem", "des", "ein", "eine", "einen", "einem",
        "einer", "eines", "und", "oder", "aber", "denn", "wenn", "weil", "während",
        "in", "im", "an", "am", "auf", "aus", "bei", "mit", "nach", "von", "vom",
        "zu", "zum", "zur", "für", "über", "unter", "durch", "gegen", "ohne", "um",
        "vor", "hinter", "neben", "zwischen", "dass", "dann", "als",
    },
}

AUXILIARY_VERBS: Dict[str, set] = {
    "en": {
        "am", "is", "are", "was", "were", "be", "been", "being", "have", "has", "had",
        "do", "does", "did", "will", "would", "shall", "should", "can", "could",
        "may", "might", "must",
    },
    "it": {
        "sono", "sei", "è", "siamo", "siete", "ero", "eri", "era", "eravamo", "erano",
        "ho", "hai", "ha", "abbiamo", "hanno", "avevo", "aveva", "avevamo", "avevano",
        "stavo", "stava", "stato", "stata", "essere", "avere",
    },
    "es": {
        "soy", "eres", "es", "somos", "son", "era", "eras", "éramos", "eran", "fui",
        "fue", "estaba", "estaban", "estoy", "está", "he", "has", "ha", "hemos",
        "han", "había", "habían", "ser", "estar", "haber",
    },
    "fr": {
        "suis", "es", "est", "sommes", "êtes", "sont", "étais", "était", "étions",
        "étaient", "ai", "as", "a", "avons", "avez", "ont", "avais", "avait",
        "avions", "avaient", "être", "avoir", "été",
    },
    "de": {
        "bin", "bist", "ist", "sind", "seid", "war", "warst", "waren", "habe", "hast",
        "hat", "haben", "hatte", "hatten", "werde", "wird", "werden", "wurde",
        "wurden", "sein", "kann", "konnte", "muss", "musste",
    },
}

GENERIC_PRONOUNS: Dict[str, set] = {
    "en": {"something", "nothing", "anything", "everything", "someone", "somebody",
           "anyone", "anybody", "everyone", "everybody", "nobody", "somewhere",
           "nowhere", "anywhere", "everywhere"},
    "it": {"qualcosa", "niente", "nulla", "tutto", "qualcuno", "nessuno", "ognuno",
           "ovunque", "dovunque"},
    "es": {"algo", "nada", "todo", "alguien", "nadie", "cualquiera", "alguno",
           "ninguno", "todos"},
    "fr": {"quelque", "chose", "rien", "tout", "quelqu'un", "personne", "chacun",
           "partout", "nulle"},
    "de": {"etwas", "nichts", "alles", "jemand", "niemand", "jeder", "irgendwas",
           "irgendwo", "überall"},
}

# Pronouns, adverbs and common verbs that carry no topic on their own
_EXTRA_STOPWORDS: Dict[str, set] = {
    "en": {
        "i", "me", "my", "mine", "myself", "you", "your", "he", "him", "his", "she",
        "her", "it", "its", "we", "us", "our", "they", "them", "their", "this",
        "these", "those", "there", "here", "what", "which", "who", "whom", "where",
        "when", "why", "how", "all", "some", "any", "each", "every", "no", "not",
        "very", "just", "also", "only", "still", "even", "again", "suddenly",
        "really", "like", "got", "get", "went", "go", "goes", "saw", "see", "seen",
        "felt", "feel", "said", "say", "came", "come", "made", "make", "knew",
        "know", "thought", "think", "seemed", "seem", "looked", "look", "started",
        "began", "tried", "wanted", "want", "took", "take", "told", "tell", "one",
        "two", "much", "many", "more", "most", "other", "another", "such", "own",
        "same", "too", "out", "up", "down", "off", "back", "away", "last", "night",
    },
    "it": {
        "io", "mi", "me", "mio", "mia", "miei", "mie", "tu", "ti", "te", "lui", "lei",
        "noi", "ci", "voi", "vi", "loro", "si", "questo", "questa", "questi", "queste",
        "quello", "quella", "quelli", "quelle", "non", "molto", "poco", "anche",
        "ancora", "già", "sempre", "mai", "improvvisamente", "come", "dove", "cosa",
        "chi", "quale", "ogni", "tutti", "tutte", "c'era", "c", "vedevo", "vidi",
        "sentivo", "sembrava", "andavo", "facevo", "fatto", "essere", "stavamo",
        "notte", "ieri", "più", "così", "solo",
    },
    "es": {
        "yo", "me", "mi", "mis", "tú", "te", "ti", "él", "ella", "nosotros",
        "nos", "vosotros", "ellos", "ellas", "se", "su", "sus", "este", "esta",
        "estos", "estas", "ese", "esa", "eso", "esto", "no", "muy", "también",
        "todavía", "ya", "siempre", "nunca", "de repente", "como", "donde", "qué",
        "quien", "cada", "había", "veía", "vi", "sentía", "parecía", "iba", "hacía",
        "noche", "ayer", "más", "así", "solo", "lo",
    },
    "fr": {
        "je", "j", "me", "m", "moi", "mon", "ma", "mes", "tu", "te", "toi", "il",
        "elle", "nous", "vous", "ils", "elles", "se", "s", "son", "sa", "ses",
        "leur", "ce", "cet", "cette", "ces", "ne", "pas", "très", "aussi", "encore",
        "déjà", "toujours", "jamais", "soudain", "comme", "où", "qui", "quoi",
        "chaque", "tous", "voyais", "vu", "sentais", "semblait", "allais", "faisais",
        "fait", "nuit", "hier", "plus", "ainsi", "y", "on", "c", "n", "qu",
    },
    "de": {
        "ich", "mich", "mir", "mein", "meine", "meinen", "du", "dich", "dir", "er",
        "sie", "es", "wir", "uns", "ihr", "euch", "sich", "sein", "seine", "dies",
        "diese", "dieser", "dieses", "nicht", "kein", "keine", "sehr", "auch",
        "noch", "schon", "immer", "nie", "plötzlich", "wie", "wo", "was", "wer",
        "jede", "alle", "sah", "fühlte", "schien", "ging", "machte", "gemacht",
        "nacht", "gestern", "mehr", "so", "nur", "da", "dort", "hier",
    },
}


def stopwords(lang: str) -> set:
    """All words that never stand as a topic on their own."""
    return (FUNCTION_WORDS.get(lang, set())
            | AUXILIARY_VERBS.get(lang, set())
            | GENERIC_PRONOUNS.get(lang, set())
            | _EXTRA_STOPWORDS.get(lang, set()))
