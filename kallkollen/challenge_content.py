"""Static quiz content: fallback news items and the fixed texts of each stage.
Fallback items are used when the content service is unavailable or returns too few items."""

from typing import Any, Dict, List


def fallback_news_items() -> List[Dict[str, Any]]:
    """Fallback items in the same JSON shape the content service returns."""
    return [
        {
            "headline": "Nytt AI-filter på TikTok kan gissa ditt framtida yrke med 99% precision",
            "body": "Enligt en läckt rapport från tech-jätten bakom appen kan det nya filtret analysera ditt ansikte, din röst och dina gillningar för att förutsäga exakt vilket jobb du kommer att ha om tio år. Tusentals användare vittnar redan om att det stämmer.",
            "source": "TechNews-Daily.se",
            "isTrue": False,
            "explanation": "Detta spelar på barnum-effekten: vi vill tro på förutsägelser som känns personliga. Ingen modell kan förutsäga ett framtida yrke med 99% precision, och 'läckta rapporter' utan länk går inte att granska.",
            "clues": [
                "Inga länkar till rapporten",
                "Sensationellt språk",
                "Precisionen är orimligt hög",
            ],
        },
        {
            "headline": "Forskare: Bläckfiskar kan redigera sitt eget RNA för att klara kyla",
            "body": "En studie publicerad i tidskriften Cell visar att bläckfiskar ändrar hur deras RNA översätts när vattnet blir kallare, vilket hjälper deras nervsystem att fungera. Fenomenet är ovanligt bland djur och har studerats i flera år.",
            "source": "Vetenskapsradion",
            "isTrue": True,
            "explanation": "Nyheten låter otrolig men stämmer. Studien är publicerad i en granskad tidskrift och flera oberoende medier och forskare har rapporterat om samma resultat.",
            "clues": [
                "Studien finns i tidskriften Cell",
                "Flera oberoende medier beskriver samma resultat",
                "Källan är en etablerad vetenskapsredaktion",
            ],
        },
        {
            "headline": "Influencer: Energidrycken som gör dig smartare på en vecka",
            "body": "En populär influencer med två miljoner följare påstår att en ny energidryck höjer IQ med 20 poäng på sju dagar. I inlägget finns en rabattkod och en bild på en 'hjärnforskare' i vit rock.",
            "source": "@brainboost_official",
            "isTrue": False,
            "explanation": "Reklam förklädd till fakta. Ett betalt samarbete, en anonym 'forskare' och ett orimligt påstående om snabb IQ-höjning är typiska varningssignaler.",
            "clues": [
                "Inlägget innehåller en rabattkod",
                "Forskaren namnges inte",
                "Inga studier stödjer påståendet",
            ],
        },
        {
            "headline": "Debatt: Därför borde skoldagen börja klockan tio",
            "body": "Som tonåring vet jag hur svårt det är att vakna tidigt. Forskning om dygnsrytm visar att ungdomars sömnbehov förskjuts, och flera skolor som provat senare start rapporterar bättre närvaro. Det är dags att politikerna lyssnar.",
            "source": "Insändare, Lokaltidningen",
            "isTrue": True,
            "explanation": "Texten är en åsiktstext med en namngiven avsändare och hänvisar till forskning som går att kontrollera. Att något är en åsikt gör det inte falskt, men det är bra att skilja på fakta och argument.",
            "clues": [
                "Forskning om ungdomars dygnsrytm finns publicerad",
                "Skribenten står för sin text",
                "Publicerad som insändare, inte som nyhet",
            ],
        },
        {
            "headline": "Viral video: Politiker erkänner att valet är riggat",
            "body": "Ett klipp som delats över 500 000 gånger visar en känd politiker som säger att valresultatet redan är bestämt. Rösten låter nästan rätt, men munnen följer inte alltid orden.",
            "source": "Okänt konto på X",
            "isTrue": False,
            "explanation": "Klippet är en deepfake. AI-genererade röster och ansikten blir allt bättre, men små fel i läppsynk och avsaknad av ursprungskälla avslöjar dem.",
            "clues": [
                "Klippet saknar originalkälla",
                "Läpparna följer inte ljudet",
                "Inga etablerade medier har rapporterat om uttalandet",
            ],
        },
        {
            "headline": "Sverige har fler öar än något annat land i världen",
            "body": "Enligt en sammanställning från Statistiska centralbyrån har Sverige över 267 000 öar, vilket är fler än något annat land. De flesta är små och obebodda.",
            "source": "SCB",
            "isTrue": True,
            "explanation": "Det stämmer. Uppgiften kommer från en officiell myndighet och kan kontrolleras direkt i deras statistik.",
            "clues": [
                "SCB har publicerat statistiken",
                "Uppgiften återges av flera uppslagsverk",
                "Siffran är specifik och går att kontrollera",
            ],
        },
    ]


# Texts for the stages whose content never changes.

WELCOME = {
    "badge": "Källkollen",
    "title": "Haka av hjärnan! 🧠",
    "prompt": (
        "Vår hjärna är lat. Den älskar System 1: snabb, emotionell och slarvig. "
        "I detta spel tränar vi System 2, den långsamma och kritiska tänkaren."
    ),
    "start_label": "Aktivera System 2",
}

STRESS_TEST = {
    "badge": "Stress-test",
    "title": "Snabba nyheter!",
    "quote": "NY LAG: Alla mobiler beslagtas i skolan dygnet runt, även hemma!",
    "prompt": "Tryck på knappen om du tror detta är sant.",
    "waiting": 'System 1 skriker: "REAGERA!"... Vänta...',
    "react_label": "Detta är sant! (Reagera nu)",
    "react_explanation": (
        "Du föll för fällan! Din hjärna reagerade emotionellt (System 1) på en sensationell rubrik. "
        "Logiskt sett kan skolan inte beslagta din mobil i ditt hem."
    ),
    "wait_label": "Vänta... detta är orimligt.",
    "wait_explanation": (
        "Snyggt! Du väntade ut din första impuls. Genom att pausa lät du System 2 "
        "analysera det orimliga i påståendet."
    ),
}

AI_DETECTION = {
    "badge": "AI-Detektiven",
    "title": "Människa eller Maskin?",
    "prompt": "Läs texten. Är den skriven av en människa eller genererad av AI?",
    "human_label": "Mänsklig källa",
    "ai_label": "AI-genererat",
}

CONFIRMATION_BIAS = {
    "badge": "Spegelsalen",
    "title": "Vems sida står du på?",
    "prompt": (
        "Vi har en tendens att lita mer på personer vi gillar eller identifierar oss med. "
        "Det kallas Halo-effekten."
    ),
    "influencer_label": (
        "👤 Din favorit-influencer: \"Lita på mig, den här nya dieten rensar kroppen på gifter på 2 dagar!\""
    ),
    "influencer_explanation": (
        "Du litade på personen istället för faktan. Källkritik handlar om VAD som sägs, "
        "inte bara VEM som säger det."
    ),
    "researcher_label": (
        "🔬 En okänd forskare: \"Det finns inga vetenskapliga bevis för att 'detox' fungerar på det sättet.\""
    ),
    "researcher_explanation": (
        "Rätt! Du genomskådade Halo-effekten. Även kändisar vi gillar kan ha fel eller vara "
        "köpta för att sprida pseudovetenskap."
    ),
}

LATERAL_READING = {
    "badge": "Lateralt Läsande",
    "title": "Läs inte bara källan, läs RUNT den.",
    "prompt": "Proffs kollar vad andra säger om källan istället för att bara stirra på sidan.",
    "reveal_label": '🔍 "Kolla runt" (Lateralt läsande)',
    "true_label": "Sant",
    "false_label": "Falskt",
}

TRUTH_EFFECT = {
    "badge": "Sanningseffekten",
    "title": "Känns det bekant?",
    "quote": "Hjärnan tolkar 'bekant' som 'sant'.",
    "prompt": (
        "Om du har hört en lögn 10 gånger börjar System 1 tro på den, bara för att den inte "
        "längre kräver energi att processa. Hur skyddar du dig mot detta?"
    ),
    "question_label": "A. Genom att medvetet ifrågasätta källan, även om det låter rimligt.",
    "question_explanation": 'Precis! Att stanna upp och fråga "Varför tror jag detta?" bryter sanningseffekten.',
    "gut_label": "B. Genom att lita på min magkänsla (System 1).",
    "gut_explanation": "Tyvärr inte. Att lita på magkänslan är precis det som gör oss sårbara för sanningseffekten.",
}

RESULTS = {
    "badge": "Resultat",
    "title": "Ditt Källkolls-Index",
    "prompt": "Här är din kognitiva profil efter testet.",
}

FEEDBACK = {
    "correct_title": "Rätt tänkt!",
    "wrong_title": "Ajdå, hjärnan tog en genväg...",
    "next_label": "Nästa utmaning",
    "last_label": "Se ditt resultat",
}
