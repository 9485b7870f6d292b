"""Built-in Czech practice passage used when no source text is supplied."""

from __future__ import annotations

SAMPLE_TEXT = (
    "Znáte krtka? Krtek má domeček pod zemí, odkud vede mnoho cest. "
    "Krtek se jimi prohání a hledá červy a ponravy. "
    "Cítí je zdaleka, nahmatá je citlivým rypáčkem a mlsá. "
    "Pod zemí je tma, ale jemu to nevadí. Jeho oči skoro nevidí. "
    "Nenosí kalhoty jako známý krteček z pohádky, ale zato má jemnou černou srst. "
    "Zahradníci krtka nemají moc rádi. Kam oko dohlédne, umí vyházet kopečky hlíny. "
    "Škodí rostlinám, podhrabává zeleninu, ničí mrkev i kytky. "
    "Zahradníci znají různé triky, jak krtky ze zahrady odlákat."
)
