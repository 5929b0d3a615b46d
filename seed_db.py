import asyncio

from ama.database import Base, async_session, engine
from ama.services.answers import submit_answer
from ama.services.questions import create_question, set_question_visibility
from ama.services.sessions import create_session, publish, share_links
from ama.services.votes import cast_vote


async def async_main():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_session() as session:
        ama = await create_session(
            session,
            "Scaling a two-person startup",
            "Ask the founders anything about hiring, infra and burnout.",
        )
        await publish(session, ama, ama.host_token)

        q1 = await create_question(session, ama.ask_token, "How did you pick your first hire?")
        q2 = await create_question(session, ama.ask_token, "Postgres or SQLite for an MVP?")
        q3 = await create_question(session, ama.ask_token, "Buy my crypto course?")

        for voter in ("10.0.0.1", "10.0.0.2", "10.0.0.3"):
            await cast_vote(session, q2.id, ama.ask_token, voter)
        await cast_vote(session, q1.id, ama.ask_token, "10.0.0.1")

        await set_question_visibility(session, q3.id, ama.host_token, True)

        await submit_answer(
            session,
            q2.id,
            ama.answer_token,
            core="Start on SQLite, move when you need concurrent writers.",
            steps="Keep SQL portable, use an ORM, run migrations from day one.",
            limits="Full-text search and JSON operators differ between the two.",
        )

        print("Seeded AMA", ama.id)
        for role, url in share_links(ama).items():
            print(f"  {role:<7} {url}")


if __name__ == "__main__":
    asyncio.run(async_main())
