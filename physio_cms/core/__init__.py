"""Noyau : schémas communs, configuration, i18n, génération d'ids."""
