"""
Demo-mode placeholder reports.

Returned when the language model cannot be reached, so the UI stays usable.
Every placeholder has the same three sections, localized body text, and
English headings.
"""
from typing import Dict, List, Optional

from medsimplify.models import Section, SimplifiedReport
from medsimplify.models.report import DEFAULT_LANGUAGE

SECTION_HEADINGS = ("Summary", "Key Findings", "Next Steps")

# language -> (title, summary, findings, next steps)
_PLACEHOLDER_CONTENT: Dict[str, tuple] = {
    "English": (
        "Simplified Medical Report (DEMO MODE)",
        "The AI service is currently unavailable due to quota limits. This is a placeholder "
        "summary. The patient has been diagnosed with a standard condition requiring "
        "medication and rest.",
        "1. Blood pressure is slightly elevated.\n"
        "2. No signs of infection were found in the latest blood work.\n"
        "3. Patient reports improved sleep patterns.",
        "Follow up with the general practitioner in 2 weeks. Continue current medication "
        "usage. Maintain a healthy diet.",
    ),
    "Spanish": (
        "Informe Médico Simplificado (MODO DEMO)",
        "El servicio de IA no está disponible actualmente debido a límites de cuota. Este es "
        "un resumen de marcador de posición. Al paciente se le ha diagnosticado una afección "
        "estándar que requiere medicación y reposo.",
        "1. La presión arterial está ligeramente elevada.\n"
        "2. No se encontraron signos de infección en el último análisis de sangre.\n"
        "3. El paciente reporta una mejora en los patrones de sueño.",
        "Haga un seguimiento con el médico general en 2 semanas. Continúe con el uso actual "
        "de medicamentos. Mantenga una dieta saludable.",
    ),
    "French": (
        "Rapport Médical Simplifié (MODE DÉMO)",
        "Le service d'IA est actuellement indisponible en raison de limites de quota. Ceci "
        "est un résumé fictif. Le patient a été diagnostiqué avec une condition standard "
        "nécessitant des médicaments et du repos.",
        "1. La tension artérielle est légèrement élevée.\n"
        "2. Aucun signe d'infection n'a été trouvé dans les dernières analyses sanguines.\n"
        "3. Le patient signale une amélioration du sommeil.",
        "Suivi avec le médecin généraliste dans 2 semaines. Continuez les médicaments "
        "actuels. Maintenez une alimentation saine.",
    ),
    "German": (
        "Vereinfachter medizinischer Bericht (DEMO-MODUS)",
        "Der KI-Dienst ist derzeit aufgrund von Quotenbeschränkungen nicht verfügbar. Dies "
        "ist eine Platzhalter-Zusammenfassung. Beim Patienten wurde eine Standarderkrankung "
        "diagnostiziert, die Medikamente und Ruhe erfordert.",
        "1. Der Blutdruck ist leicht erhöht.\n"
        "2. In den letzten Blutuntersuchungen wurden keine Anzeichen einer Infektion gefunden.\n"
        "3. Der Patient berichtet über verbesserte Schlafmuster.",
        "Nachuntersuchung beim Allgemeinarzt in 2 Wochen. Führen Sie die aktuelle "
        "Medikamenteneinnahme fort. Ernähren Sie sich gesund.",
    ),
    "Hindi": (
        "सरलीकृत चिकित्सा रिपोर्ट (डेमो मोड)",
        "कोटा सीमाओं के कारण एआई सेवा वर्तमान में अनुपलब्ध है। यह एक डेमो सारांश है। रोगी को एक "
        "सामान्य स्थिति का निदान किया गया है जिसके लिए दवा और आराम की आवश्यकता है।",
        "1. रक्तचाप थोड़ा बढ़ा हुआ है।\n"
        "2. नवीनतम रक्त जांच में संक्रमण का कोई संकेत नहीं मिला।\n"
        "3. रोगी ने नींद के पैटर्न में सुधार की सूचना दी है।",
        "2 सप्ताह में सामान्य चिकित्सक के साथ फॉलो-अप करें। वर्तमान दवा का उपयोग जारी रखें। "
        "स्वस्थ आहार बनाए रखें।",
    ),
    "Chinese": (
        "简化医疗报告 (演示模式)",
        "由于配额限制，AI 服务目前不可用。这是一个占位符摘要。患者被诊断患有需要药物治疗和休息的标准疾病。",
        "1. 血压略有升高。\n"
        "2. 在最新的血液检查中未发现感染迹象。\n"
        "3. 患者报告睡眠模式有所改善。",
        "2 周后向全科医生复诊。继续当前药物使用。保持健康饮食。",
    ),
    "Japanese": (
        "簡略化された医療レポート (デモモード)",
        "クォータ制限のため、AI サービスは現在利用できません。これはプレースホルダーの要約です。"
        "患者は投薬と安静を必要とする標準的な状態と診断されました。",
        "1. 血圧がわずかに上昇しています。\n"
        "2. 最新の血液検査では感染の兆候は見つかりませんでした。\n"
        "3. 患者は睡眠パターンの改善を報告しています。",
        "2 週間後に一般開業医の診察を受けてください。現在の薬の使用を続けてください。"
        "健康的な食事を維持してください。",
    ),
    "Bengali": (
        "সরলীকৃত মেডিকেল রিপোর্ট (ডেমো মোড)",
        "কোটা সীমার কারণে এআই পরিষেবা বর্তমানে অনুপলব্ধ। এটি একটি ডেমো সারাংশ। রোগীর একটি "
        "সাধারণ অবস্থা নির্ণয় করা হয়েছে যার জন্য ওষুধ এবং বিশ্রামের প্রয়োজন।",
        "১. রক্তচাপ কিছুটা বেশি।\n"
        "২. সর্বশেষ রক্ত পরীক্ষায় সংক্রমণের কোনো লক্ষণ পাওয়া যায়নি।\n"
        "৩. রোগী ঘুমের ধরণ উন্নত হয়েছে বলে জানিয়েছেন।",
        "২ সপ্তাহের মধ্যে সাধারণ চিকিৎসকের সাথে ফলো-আপ করুন। বর্তমান ওষুধ ব্যবহার চালিয়ে যান। "
        "স্বাস্থ্যকর খাদ্য বজায় রাখুন।",
    ),
}

# English first, then the rest in table order
PLACEHOLDER_LANGUAGES: List[str] = list(_PLACEHOLDER_CONTENT)


def placeholder_report(language: Optional[str] = DEFAULT_LANGUAGE) -> SimplifiedReport:
    """
    Build the demo-mode report for a language.

    Lookup is an exact, case-sensitive match; unknown or empty languages get
    the English placeholder. The returned report keeps the requested language
    so export picks the matching font.
    """
    content = _PLACEHOLDER_CONTENT.get(language or "", _PLACEHOLDER_CONTENT[DEFAULT_LANGUAGE])
    title, *bodies = content
    return SimplifiedReport(
        title=title,
        sections=[
            Section(heading=heading, content=body)
            for heading, body in zip(SECTION_HEADINGS, bodies)
        ],
        language=language or DEFAULT_LANGUAGE,
    )
