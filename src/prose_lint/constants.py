"""Word lists and defaults shared by the prose checks."""

# Forms of "to be" that introduce a passive construction
PASSIVE_AUXILIARIES: tuple[str, ...] = (
    "am",
    "are",
    "were",
    "being",
    "is",
    "been",
    "was",
    "be",
)

# Past participles that do not end in -ed
IRREGULAR_PARTICIPLES: tuple[str, ...] = (
    "awoken", "been", "born", "beat", "become", "begun", "bent", "beset",
    "bet", "bid", "bidden", "bound", "bitten", "bled", "blown", "broken",
    "bred", "brought", "broadcast", "built", "burnt", "burst", "bought",
    "cast", "caught", "chosen", "clung", "come", "cost", "crept", "cut",
    "dealt", "dug", "dived", "done", "drawn", "dreamt", "driven", "drunk",
    "eaten", "fallen", "fed", "felt", "fought", "found", "fit", "fled",
    "flung", "flown", "forbidden", "forgotten", "foregone", "forgiven",
    "forsaken", "frozen", "gotten", "given", "gone", "ground", "grown",
    "hung", "heard", "hidden", "hit", "held", "hurt", "kept", "knelt",
    "knit", "known", "laid", "led", "leapt", "learnt", "left", "lent", "let",
    "lain", "lighted", "lost", "made", "meant", "met", "misspelt", "mistaken",
    "mown", "overcome", "overdone", "overtaken", "overthrown", "paid", "pled",
    "proven", "put", "quit", "read", "rid", "ridden", "rung", "risen", "run",
    "sawn", "said", "seen", "sought", "sold", "sent", "set", "sewn", "shaken",
    "shaven", "shorn", "shed", "shone", "shod", "shot", "shown", "shrunk",
    "shut", "sung", "sunk", "sat", "slept", "slain", "slid", "slung", "slit",
    "smitten", "sown", "spoken", "sped", "spent", "spilt", "spun", "spit",
    "split", "spread", "sprung", "stood", "stolen", "stuck", "stung",
    "stunk", "stridden", "struck", "strung", "striven", "sworn", "swept",
    "swollen", "swum", "swung", "taken", "taught", "torn", "told", "thought",
    "thrived", "thrown", "thrust", "trodden", "understood", "upheld",
    "upset", "woken", "worn", "woven", "wed", "wept", "wound", "won",
    "withheld", "withstood", "wrung", "written",
)

WEASEL_WORDS: tuple[str, ...] = (
    "are a number",
    "clearly",
    "completely",
    "exceedingly",
    "excellent",
    "extremely",
    "fairly",
    "few",
    "huge",
    "interestingly",
    "is a number",
    "largely",
    "many",
    "mostly",
    "obviously",
    "quite",
    "relatively",
    "remarkably",
    "several",
    "significantly",
    "substantially",
    "surprisingly",
    "tiny",
    "various",
    "vast",
    "very",
)

ADVERBS: tuple[str, ...] = (
    "absolutely", "accidentally", "additionally", "allegedly",
    "alternatively", "angrily", "anxiously", "approximately", "awkwardly",
    "badly", "barely", "beautifully", "blindly", "boldly", "bravely",
    "brightly", "briskly", "bristly", "bubbly", "busily", "calmly",
    "carefully", "carelessly", "cautiously", "cheerfully", "commonly",
    "correctly", "courageously", "crossly", "cruelly", "curiously",
    "currently", "dangerously", "deeply", "definitely", "deliberately",
    "doubtfully", "dramatically", "eagerly", "easily", "effectively",
    "elegantly", "enormously", "entirely", "equally", "essentially",
    "evenly", "eventually", "exactly", "explicitly", "faithfully",
    "finally", "foolishly", "fortunately", "frankly", "frantically",
    "generally", "generously", "gently", "genuinely", "gladly", "gracefully",
    "greatly", "happily", "hastily", "heavily", "highly", "honestly",
    "hopefully", "hungrily", "immediately", "incredibly", "indeed",
    "initially", "instantly", "intensely", "jealously", "joyfully",
    "kindly", "lazily", "literally", "loosely", "loudly", "madly",
    "merely", "mysteriously", "naturally", "nearly", "neatly", "nervously",
    "noisily", "normally", "openly", "painfully", "patiently", "perfectly",
    "personally", "politely", "poorly", "positively", "possibly",
    "potentially", "precisely", "presumably", "probably", "promptly",
    "properly", "quickly", "quietly", "randomly", "rapidly", "rarely",
    "really", "recently", "regularly", "reluctantly", "repeatedly",
    "rightfully", "roughly", "rudely", "sadly", "safely", "seemingly",
    "seriously", "sharply", "shortly", "silently", "simply", "sincerely",
    "slightly", "slowly", "smoothly", "softly", "solely", "specifically",
    "speedily", "strictly", "strongly", "successfully", "suddenly",
    "supposedly", "surely", "swiftly", "terribly", "thankfully",
    "thoroughly", "totally", "truly", "typically", "ultimately",
    "unfortunately", "usually", "utterly", "virtually", "warmly", "wildly",
    "willfully", "wisely",
)

WORDY_PHRASES: tuple[str, ...] = (
    "a number of", "abundance", "accede to", "accelerate", "accentuate",
    "accompany", "accomplish", "accorded", "accrue", "acquiesce", "acquire",
    "additional", "adjacent to", "adjustment", "admissible", "advantageous",
    "adversely impact", "advise", "aforementioned", "aggregate", "all of",
    "all things considered", "alleviate", "allocate", "along the lines of",
    "already existing", "ameliorate", "anticipate", "apparent",
    "appreciable", "as a matter of fact", "as a means of",
    "as far as i'm concerned", "as of yet", "as to", "as yet", "ascertain",
    "assistance", "at the present time", "at this time", "attain",
    "attributable to", "authorize", "because of the fact that", "belated",
    "benefit from", "bestow", "by means of", "by virtue of", "capability",
    "cease", "close proximity", "commence", "comply with", "concerning",
    "consequently", "consolidate", "constitutes", "demonstrate", "depart",
    "designate", "discontinue", "due to the fact that", "each and every",
    "economical", "eliminate", "elucidate", "employ", "endeavor",
    "enumerate", "equitable", "equivalent", "evaluate", "evidenced",
    "exclusively", "expedite", "expend", "expiration", "facilitate",
    "factual evidence", "feasible", "finalize", "first and foremost",
    "for the purpose of", "forfeit", "formulate", "have a tendency to",
    "honest truth", "however", "if and when", "impacted", "implement",
    "in a manner of speaking", "in a timely manner", "in a very real sense",
    "in accordance with", "in addition", "in all likelihood",
    "in an effort to", "in between", "in excess of", "in lieu of",
    "in light of the fact that", "in many cases", "in my opinion",
    "in order to", "in regard to", "in some instances", "in terms of",
    "in the near future", "in the process of", "inception",
    "incumbent upon", "indicate", "indication", "initiate", "irregardless",
    "is applicable to", "is authorized to", "is responsible for",
    "it is essential", "it seems that", "magnitude", "maximum",
    "methodology", "minimize", "minimum", "modify", "monitor", "multiple",
    "necessitate", "nevertheless", "not certain", "not many", "not often",
    "not unless", "not unlike", "notwithstanding", "null and void",
    "numerous", "objective", "obligate", "obtain", "on the contrary",
    "on the other hand", "one particular", "optimum", "overall",
    "owing to the fact that", "participate", "particulars", "pass away",
    "pertaining to", "point in time", "portion", "possess", "preclude",
    "previously", "prior to", "prioritize", "procure", "proficiency",
    "provided that", "purchase", "put simply", "readily apparent",
    "refer back", "regarding", "relocate", "remainder", "remuneration",
    "require", "requirement", "reside", "residence", "retain", "satisfy",
    "shall", "should you wish", "similar to", "solicit", "span across",
    "strategize", "subsequent", "substantial", "successfully complete",
    "sufficient", "terminate", "the month of", "time period",
    "took advantage of", "transmit", "transpire", "type of",
    "until such time as", "utilization", "utilize", "validate",
    "various different", "what i mean to say is", "whether or not",
    "with respect to", "with the exception of", "witnessed",
)

CLICHES: tuple[str, ...] = (
    "a chip off the old block", "a clean slate", "a dark and stormy night",
    "a far cry", "a fine kettle of fish", "a loose cannon",
    "a penny saved is a penny earned", "a tough row to hoe",
    "a word to the wise", "ace in the hole", "acid test",
    "add insult to injury", "against all odds", "air your dirty laundry",
    "all in a day's work", "all talk, no action", "all things being equal",
    "all's well that ends well", "apple of my eye", "as luck would have it",
    "at the end of the day", "avoid like the plague", "back to basics",
    "back to the drawing board", "ballpark figure", "barking up the wrong tree",
    "beat around the bush", "behind the eight ball", "best thing since sliced bread",
    "better late than never", "bite the bullet", "bitter end",
    "blessing in disguise", "bottom line", "break the ice", "by the book",
    "calm before the storm", "can of worms", "clear as mud",
    "come full circle", "cool as a cucumber", "crystal clear",
    "cut to the chase", "dead as a doornail", "easier said than done",
    "every cloud has a silver lining", "few and far between",
    "first and foremost", "game changer", "going forward",
    "hit the nail on the head", "in the nick of time", "it goes without saying",
    "keep your eyes peeled", "last but not least", "level playing field",
    "low-hanging fruit", "move the needle", "needle in a haystack",
    "only time will tell", "outside the box", "paradigm shift",
    "piece of cake", "play it by ear", "push the envelope",
    "raining cats and dogs", "read between the lines", "tip of the iceberg",
    "think outside the box", "time will tell", "under the weather",
    "win-win situation", "writing on the wall",
)

# Forms of "to be" avoided in E-Prime
EPRIME_WORDS: tuple[str, ...] = (
    "be", "being", "been", "am", "is", "isn't", "are", "aren't", "was",
    "wasn't", "were", "weren't", "i'm", "you're", "we're", "they're",
    "he's", "she's", "it's", "there's", "here's", "where's", "how's",
    "what's", "who's", "that's", "ain't", "hasn't been", "haven't been",
    "hadn't been",
)

# Checks that only run when explicitly enabled
DISABLED_BY_DEFAULT: frozenset[str] = frozenset({"eprime"})
