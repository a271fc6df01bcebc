from dataclasses import dataclass, field
from datetime import datetime, timezone

from halpresenter import Presenter, PresenterRegistry, Property, named

registry = PresenterRegistry()

UPDATED_AT = datetime.fromtimestamp(1381734000, tz=timezone.utc)
CREATED_AT = datetime.fromtimestamp(1381834000, tz=timezone.utc)


@named()
@dataclass(eq=False)
class Document:
    name: str
    path: str
    content_type: str
    related_documents: list["Document"] = field(default_factory=list)


@named()
@dataclass(eq=False)
class User:
    name: str
    age: int
    friends: list["User"] = field(default_factory=list)
    documents: list[Document] = field(default_factory=list)


class DocumentPresenter(Presenter, registry=registry, presents=Document):
    name = Property()
    path = Property()
    content_type = Property()
    updated_at = Property(lambda document, context: UPDATED_AT)
    created_at = Property(lambda document, context: CREATED_AT)


class RelatedDocumentPresenter(DocumentPresenter):
    pass


DocumentPresenter.property("related_documents", with_=RelatedDocumentPresenter)


class UserPresenter(Presenter, registry=registry, presents=User):
    name = Property()
    age = Property()
    location = Property(lambda user, context: "37.788079, -122.401288")
    updated_at = Property(lambda user, context: UPDATED_AT)
    created_at = Property(lambda user, context: CREATED_AT)
    documents = Property(with_=DocumentPresenter)


UserPresenter.property("friends", with_=UserPresenter)


def make_documents() -> list[Document]:
    documents = [
        Document(f"Document {i}", f"/documents/{i}", "text/html") for i in range(10)
    ]
    for i, document in enumerate(documents):
        document.related_documents.append(documents[-i])
    return documents


def make_users() -> list[User]:
    documents = make_documents()
    david = User("David", 26, [], documents[0:6])
    julie = User("Julie", 29, [david], documents[3:9])
    thomas = User("Thomas", 28, [david, julie], documents[6:10])
    alfred = User("Alfred", 24, [david, julie, thomas], [])
    return [david, julie, thomas, alfred]
