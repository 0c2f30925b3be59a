"""Static daily content collections."""

from __future__ import annotations

HADITH_COLLECTION: list[dict[str, str]] = [
    {
        "id": "niat",
        "english": "Actions are judged by intentions, and every person will get what they intended.",
        "malay": "Sesungguhnya setiap amalan itu bergantung kepada niat, dan setiap orang akan mendapat apa yang diniatkannya.",
        "source": "Sahih al-Bukhari & Sahih Muslim",
    },
    {
        "id": "ukhuwah",
        "english": "None of you truly believes until he loves for his brother what he loves for himself.",
        "malay": "Tidak sempurna iman seseorang daripada kamu sehingga dia mengasihi saudaranya sebagaimana dia mengasihi dirinya sendiri.",
        "source": "Sahih al-Bukhari & Sahih Muslim",
    },
    {
        "id": "marah",
        "english": "The strong one is not the one who overcomes others by strength, but the one who controls himself when angry.",
        "malay": "Orang yang kuat bukanlah yang menang bergusti, tetapi orang yang dapat mengawal dirinya ketika marah.",
        "source": "Sahih al-Bukhari & Sahih Muslim",
    },
    {
        "id": "lisan",
        "english": "Whoever believes in Allah and the Last Day, let him speak good or remain silent.",
        "malay": "Sesiapa yang beriman kepada Allah dan hari akhirat, hendaklah dia berkata baik atau diam.",
        "source": "Sahih al-Bukhari & Sahih Muslim",
    },
    {
        "id": "senyum",
        "english": "Your smile in the face of your brother is charity.",
        "malay": "Senyumanmu di hadapan saudaramu adalah sedekah.",
        "source": "Sunan at-Tirmidhi",
    },
    {
        "id": "istiqamah",
        "english": "The most beloved deeds to Allah are those done consistently, even if they are small.",
        "malay": "Amalan yang paling dicintai Allah ialah amalan yang berterusan walaupun sedikit.",
        "source": "Sahih al-Bukhari & Sahih Muslim",
    },
    {
        "id": "mukmin",
        "english": "How wonderful is the affair of the believer, for all of his affairs are good for him.",
        "malay": "Sungguh menakjubkan urusan orang mukmin, kerana semua urusannya adalah baik baginya.",
        "source": "Sahih Muslim",
    },
    {
        "id": "mudah",
        "english": "Make things easy and do not make them difficult; give glad tidings and do not drive people away.",
        "malay": "Permudahkanlah dan jangan menyusahkan, gembirakanlah dan jangan menjauhkan.",
        "source": "Sahih al-Bukhari",
    },
]

# Rotates by weekday on the sign-in screen.
ISLAMIC_QUOTES: list[dict[str, str]] = [
    {
        "arabic": "إِنَّ مَعَ الْعُسْرِ يُسْرًا",
        "reference": "al-Inshirah 94:6",
        "malay": "Sesungguhnya bersama kesulitan itu ada kemudahan.",
        "english": "Indeed, with hardship comes ease.",
    },
    {
        "arabic": "وَتَوَكَّلْ عَلَى اللَّهِ وَكَفَىٰ بِاللَّهِ وَكِيلًا",
        "reference": "al-Ahzab 33:3",
        "malay": "Dan bertawakkallah kepada Allah, dan cukuplah Allah sebagai Pelindung.",
        "english": "And put your trust in Allah, and Allah is sufficient as a Disposer of affairs.",
    },
    {
        "arabic": "فَاذْكُرُونِي أَذْكُرْكُمْ",
        "reference": "al-Baqarah 2:152",
        "malay": "Maka ingatlah kamu kepada-Ku, nescaya Aku ingat kepadamu.",
        "english": "So remember Me; I will remember you.",
    },
    {
        "arabic": "وَهُوَ مَعَكُمْ أَيْنَ مَا كُنتُمْ",
        "reference": "al-Hadid 57:4",
        "malay": "Dan Dia bersama kamu di mana saja kamu berada.",
        "english": "And He is with you wherever you are.",
    },
]

MOOD_VERSES: dict[str, dict[str, str]] = {
    "high": {
        "arabic": "وَإِذْ تَأَذَّنَ رَبُّكُمْ لَئِن شَكَرْتُمْ لَأَزِيدَنَّكُمْ وَلَئِن كَفَرْتُمْ إِنَّ عَذَابِي لَشَدِيدٌ",
        "english": "And remember when your Lord proclaimed: 'If you are grateful, I will certainly give you more. But if you are ungrateful, surely My punishment is severe.'",
        "malay": "Dan ingatlah ketika Tuhanmu memaklumkan: 'Sesungguhnya jika kamu bersyukur, nescaya Aku akan menambah nikmat kepadamu, tetapi jika kamu kufur, sesungguhnya azab-Ku sangat pedih.'",
        "reference": "Surah Ibrahim (14:7)",
        "theme_en": "Gratitude multiplies blessings",
        "theme_bm": "Syukur melipatgandakan nikmat",
    },
    "mid": {
        "arabic": "إِنَّ الَّذِينَ قَالُوا رَبُّنَا اللَّهُ ثُمَّ اسْتَقَامُوا تَتَنَزَّلُ عَلَيْهِمُ الْمَلَائِكَةُ أَلَّا تَخَافُوا وَلَا تَحْزَنُوا وَأَبْشِرُوا بِالْجَنَّةِ الَّتِي كُنتُمْ تُوعَدُونَ",
        "english": "Indeed, those who say 'Our Lord is Allah' and then remain steadfast, the angels descend upon them saying: 'Do not fear, and do not grieve. Receive the glad tidings of Paradise which you have been promised.'",
        "malay": "Sesungguhnya orang-orang yang berkata 'Tuhan kami ialah Allah', kemudian mereka istiqamah, para malaikat turun kepada mereka berkata: 'Janganlah kamu takut dan janganlah kamu bersedih, dan bergembiralah dengan syurga yang dijanjikan kepada kamu.'",
        "reference": "Surah Fussilat (41:30)",
        "theme_en": "Stay steadfast, peace awaits",
        "theme_bm": "Teruskan istiqamah, ketenangan menanti",
    },
    "low": {
        "arabic": "فَإِنَّ مَعَ الْعُسْرِ يُسْرًا ۝ إِنَّ مَعَ الْعُسْرِ يُسْرًا",
        "english": "Indeed, with hardship comes ease. Indeed, with hardship comes ease.",
        "malay": "Sesungguhnya bersama kesulitan itu ada kemudahan. Sesungguhnya bersama kesulitan itu ada kemudahan.",
        "reference": "Surah al-Inshirah (94:5-6)",
        "theme_en": "After every hardship comes ease",
        "theme_bm": "Selepas setiap kesulitan ada kemudahan",
    },
}


def mood_band(average: float) -> str:
    """Map an average mood (1-5) to 'high', 'mid' or 'low'."""
    if average >= 4:
        return "high"
    if average <= 2:
        return "low"
    return "mid"


def mood_verse(average: float) -> dict[str, str]:
    return MOOD_VERSES[mood_band(average)]
