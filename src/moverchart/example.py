"""Sample input document, handy for previews and smoke tests."""

EXAMPLE_REQUEST = {
    "title_main": "Sep 15",
    "title_sub": "Big Movers & Drivers",
    "data": [
        {
            "ticker": "CHEK",
            "name": "Check-cap",
            "logo": "https://cdn.ainvest.com/icon/us/CHEK.png",
            "driver": "Merger deal with MBody AI; cancer diagnostics focus",
            "change_pct": "+184.18%",
        },
        {
            "ticker": "HSDT",
            "name": "Helius Medical",
            "logo": "https://cdn.ainvest.com/icon/us/HSDT.png",
            "driver": "PIPE financing; launched Sol Treasury with $500M",
            "change_pct": "+141.67%",
        },
        {
            "ticker": "NAOV",
            "name": "NanoVibronix",
            "logo": "https://cdn.ainvest.com/icon/us/NAOV.png",
            "driver": "Patent for medical navigation; home healthcare devices",
            "change_pct": "+64.87%",
        },
        {
            "ticker": "OPI",
            "name": "Office Properties",
            "logo": "https://cdn.ainvest.com/icon/us/OPI.png",
            "driver": "ABS issuance surged; dividend suspended",
            "change_pct": "+59.71%",
        },
        {
            "ticker": "RCEL",
            "name": "AVITA Medical",
            "logo": "https://cdn.ainvest.com/icon/us/RCEL.png",
            "driver": "RECELL GO gained EU CE mark; Europe expansion",
            "change_pct": "+48.25%",
        },
        {
            "ticker": "GLUE",
            "name": "Monte Rosa",
            "logo": "https://cdn.ainvest.com/icon/us/GLUE.png",
            "driver": "$5.7B Novartis drug partnership",
            "change_pct": "+44.07%",
        },
        {
            "ticker": "WOLF",
            "name": "Wolfspeed",
            "logo": "https://cdn.ainvest.com/icon/us/WOLF.png",
            "driver": "Restructuring cut debt 70%; SiC semiconductor focus",
            "change_pct": "+27.04%",
        },
        {
            "ticker": "GPUS",
            "name": "Hyperscale Data",
            "logo": "https://cdn.ainvest.com/icon/us/GPUS.png",
            "driver": "NVIDIA GPU expansion; $100M Bitcoin fund",
            "change_pct": "+22.43%",
        },
    ],
}
