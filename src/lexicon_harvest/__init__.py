# ABOUTME: Lexicon Harvest - Spanish dictionary records harvested from Wiktionary
# ABOUTME: Extraction pipeline turning noisy wiki markup into [word][definition][origin] records
